from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.cells import cell_len


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    NOTIFY_TITLE: str = "pathdisplay"

    # Results window chrome reserved when truncating
    SELECTION_CARET: str = "> "
    CHROME_PADDING: int = 2
    ELLIPSIS: str = "…"

    DEFAULT_SHORTEN_LEN: int = 1
    COMMAND_TIMEOUT: int = 10

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PATH_DISPLAY_", extra="ignore")

    def reserved_width(self, extra: int = 0) -> int:
        """Width consumed by picker chrome around a result line.

        Args:
            extra: Additional fixed amount to reserve (e.g. a numeric truncate value)

        Returns:
            Number of terminal cells not available to the path itself
        """
        return cell_len(self.SELECTION_CARET) + self.CHROME_PADDING + extra


@lru_cache
def get_settings() -> Settings:
    return Settings()
