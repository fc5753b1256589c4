"""
User Data Stream listenKey 관리 파사드

API 키 헤더만 필요 (서명 없음).
"""

import logging

from adapters.binance.models import ListenKey
from adapters.binance.rest_client import BinanceHttpClient
from core.types import ApiFamily

logger = logging.getLogger(__name__)


LISTEN_KEY_PATH: dict[ApiFamily, str] = {
    ApiFamily.SPOT: "/api/v3/userDataStream",
    ApiFamily.USD_M_FUTURES: "/fapi/v1/listenKey",
    ApiFamily.COIN_M_FUTURES: "/dapi/v1/listenKey",
}


class UserStreamService:
    """listenKey 생성 / 연장 / 삭제

    listenKey는 60분 후 만료되므로 30분마다 keep_alive 호출 필요.
    """

    def __init__(self, client: BinanceHttpClient, family: ApiFamily = ApiFamily.SPOT):
        self.client = client
        self.family = family
        self.path = LISTEN_KEY_PATH[family]

    async def start(self) -> str:
        """listenKey 생성"""
        data = await self.client.post_with_key(self.path, response_model=ListenKey)
        logger.info("listenKey created", extra={"family": self.family.value})
        return data.listen_key

    async def keep_alive(self, listen_key: str) -> None:
        """listenKey 유효기간 연장"""
        await self.client.put_with_key(self.path, params={"listenKey": listen_key})
        logger.debug("listenKey extended")

    async def close(self, listen_key: str) -> None:
        """listenKey 삭제"""
        await self.client.delete_with_key(self.path, params={"listenKey": listen_key})
        logger.info("listenKey deleted", extra={"family": self.family.value})
