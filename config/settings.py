"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _env(*names: str, default: str = '') -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value.strip()
    return default


class Settings:
    """
    Process-wide settings, read once from the environment.

    The bot historically used the LOLBOT_* variable names; the plain
    RIOT_* names are accepted as well.
    """

    RIOT_API_KEY: str = _env('LOLBOT_RIOT_TOKEN', 'RIOT_API_KEY')
    RIOT_REGION:  str = _env('LOLBOT_RIOT_REGION', 'RIOT_REGION')
    DEFAULT_REGION: str = 'EUN1'

    # ── HTTP ───────────────────────────────────────────────────────────────
    # Fixed delay, no jitter: every retry waits exactly RETRY_DELAY seconds.
    REQUEST_TIMEOUT:        float = float(_env('REQUEST_TIMEOUT', default='10'))
    MAX_RETRIES:            int   = int(_env('MAX_RETRIES', default='3'))
    RATE_LIMIT_MAX_RETRIES: int   = int(_env('RATE_LIMIT_MAX_RETRIES', default='10'))
    RETRY_DELAY:            float = float(_env('RETRY_DELAY', default='5'))

    # Upper bound for one get_live_match_ranks() call, retries included.
    REQUEST_BUDGET: float = float(_env('REQUEST_BUDGET', default='90'))

    # ── Static data ────────────────────────────────────────────────────────
    DDRAGON_VERSION: str = _env('DDRAGON_VERSION', default='10.7.1')
    DDRAGON_LOCALE:  str = _env('DDRAGON_LOCALE', default='en_US')
    DDRAGON_BASE_URL: str = 'https://ddragon.leagueoflegends.com/cdn'

    # ── Paths ──────────────────────────────────────────────────────────────
    STATE_DIR: Path = Path(_env('XDG_STATE_HOME', default=str(Path.home() / '.local' / 'state'))) / 'lolranks'
    LOG_DIR:   Path = Path(_env('LOG_DIR', default=str(STATE_DIR / 'logs'))).expanduser()

    LOG_LEVEL: str = _env('LOG_LEVEL', default='INFO')

    @classmethod
    def champion_catalog_url(cls, version: str | None = None) -> str:
        return (
            f"{cls.DDRAGON_BASE_URL}/{version or cls.DDRAGON_VERSION}"
            f"/data/{cls.DDRAGON_LOCALE}/champion.json"
        )


settings = Settings()
