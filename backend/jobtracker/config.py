from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".jobtracker"
    api_prefix: str = "/api"
    session_cookie_name: str = "jobtracker.session-token"
    session_ttl_seconds: int = 30 * 24 * 3600  # 30 days
    cors_origins: list[str] = [
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def db_path(self) -> Path:
        return self.data_dir / "db.sqlite"

    model_config = {"env_prefix": "JOBTRACKER_"}


settings = Settings()
