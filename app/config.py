import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


@dataclass
class Settings:
    """Configuración de la aplicación (sobrescribible con variables de entorno)."""
    data_path: Path = BASE_DIR / "data"
    static_path: Path = BASE_DIR.parent / "static"
    sample_file: str = "sample_graph.csv"
    max_vertices: int = 100
    max_edges: int = 1000
    canvas_size: float = 600.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            data_path=Path(os.getenv("MST_DATA_PATH", defaults.data_path)),
            static_path=Path(os.getenv("MST_STATIC_PATH", defaults.static_path)),
            sample_file=os.getenv("MST_SAMPLE_FILE", defaults.sample_file),
            max_vertices=int(os.getenv("MST_MAX_VERTICES", defaults.max_vertices)),
            max_edges=int(os.getenv("MST_MAX_EDGES", defaults.max_edges)),
            canvas_size=float(os.getenv("MST_CANVAS_SIZE", defaults.canvas_size)),
            log_level=os.getenv("MST_LOG_LEVEL", defaults.log_level).upper(),
        )

    @property
    def sample_path(self) -> Path:
        return self.data_path / self.sample_file


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
