"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BinanceEndpoints:
    """Binance REST 엔드포인트 (고정값)

    공식 문서: https://developers.binance.com/docs/binance-spot-api-docs/rest-api
    """

    # Production
    PROD_SPOT_REST_URL: str = "https://api.binance.com"
    PROD_FUTURES_REST_URL: str = "https://fapi.binance.com"
    PROD_COIN_FUTURES_REST_URL: str = "https://dapi.binance.com"

    # Testnet
    TEST_SPOT_REST_URL: str = "https://testnet.binance.vision"
    TEST_FUTURES_REST_URL: str = "https://demo-fapi.binance.com"
    TEST_COIN_FUTURES_REST_URL: str = "https://testnet.binancefuture.com"

    # Binance.US (spot 전용)
    US_SPOT_REST_URL: str = "https://api.binance.us"


class ApiHeaders:
    """요청 헤더 이름"""

    API_KEY: str = "X-MBX-APIKEY"
    FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded"


class Defaults:
    """기본값 상수"""

    RECV_WINDOW_MS: int = 5000
    TIMEOUT_SEC: float = 30.0


class EnvVars:
    """자격 증명 환경 변수 이름"""

    API_KEY: str = "BINANCE_API_KEY"
    API_SECRET: str = "BINANCE_API_SECRET_KEY"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "binance.yaml"
