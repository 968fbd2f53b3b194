import logging
import math
from typing import Any, Dict, List, Union

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field, field_validator, model_validator

from app.algorithms.errors import InvalidArgumentError, VertexIndexError
from app.algorithms.kruskal import Edge, kruskal_mst
from app.config import configure_logging, get_settings
from app.utils.graph_loader import infer_num_vertices, load_edges
from app.utils.rendering import render_result

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


class EdgeIn(BaseModel):
    source: int = Field(ge=0)
    destination: int = Field(ge=0)
    weight: Union[int, float]

    @field_validator("weight")
    @classmethod
    def weight_must_be_finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("el peso debe ser un número finito")
        return v


class MSTRequest(BaseModel):
    num_vertices: int = Field(ge=1)
    edges: List[EdgeIn] = []

    @model_validator(mode="after")
    def check_limits(self):
        if self.num_vertices > settings.max_vertices:
            raise ValueError(f"se admiten como máximo {settings.max_vertices} vértices")
        if len(self.edges) > settings.max_edges:
            raise ValueError(f"se admiten como máximo {settings.max_edges} aristas")
        for i, e in enumerate(self.edges, start=1):
            if e.source >= self.num_vertices or e.destination >= self.num_vertices:
                raise ValueError(
                    f"Arista {i} inválida: los vértices deben estar entre 0 y {self.num_vertices - 1}."
                )
        return self

    def to_edges(self) -> List[Edge]:
        return [Edge(e.source, e.destination, e.weight) for e in self.edges]


app = FastAPI(title="Kruskal MST")
app.mount("/static", StaticFiles(directory=settings.static_path), name="static")

logger.info("Cargando grafo de ejemplo desde %s...", settings.sample_path)
SAMPLE_EDGES = load_edges(settings.sample_path)
SAMPLE_VERTICES = infer_num_vertices(SAMPLE_EDGES)
logger.info("Grafo de ejemplo listo: %d vértices, %d aristas.", SAMPLE_VERTICES, len(SAMPLE_EDGES))


@app.get("/")
async def index():
    return FileResponse(settings.static_path / "index.html")


def compute_mst_payload(num_vertices: int, edges: List[Edge]) -> Dict[str, Any]:
    """
    Calcula el MST y arma la respuesta para el lienzo.
    Retorna el payload de dibujo o un diccionario con 'error'.
    """
    try:
        result = kruskal_mst(num_vertices, edges)
    except (InvalidArgumentError, VertexIndexError) as e:
        logger.warning("Entrada rechazada: %s", e)
        return {"error": str(e)}

    logger.info(
        "MST calculado: V=%d, %d aristas, costo=%s", num_vertices, len(result.edges), result.cost
    )
    return render_result(num_vertices, edges, result, size=settings.canvas_size)


@app.post("/mst")
async def get_mst(req: MSTRequest):
    return compute_mst_payload(req.num_vertices, req.to_edges())


@app.get("/sample")
async def get_sample():
    return compute_mst_payload(SAMPLE_VERTICES, SAMPLE_EDGES)
