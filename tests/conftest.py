"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 binance.yaml 파일 생성"""
    content = """# 테스트용 binance.yaml
mode: testnet
timeout: 10
recv_window: 7000
capabilities:
  - spot
  - usd_m_futures

credentials:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
"""
    path = temp_dir / "binance.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def temp_settings_file_production(temp_dir: Path) -> Path:
    """테스트용 binance.yaml 파일 생성 (production, 자격 증명 없음)"""
    content = """mode: production

endpoints:
  spot: "https://api1.binance.com"
"""
    path = temp_dir / "binance_prod.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def temp_settings_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 binance.yaml 파일 생성"""
    content = """mode: invalid_mode
"""
    path = temp_dir / "binance_invalid.yaml"
    path.write_text(content, encoding="utf-8")
    return path
