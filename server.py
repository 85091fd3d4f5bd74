from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from tfidf_similarity import Document, SimilarityModel, TfIdfSimilarityError, __version__, build_model, get_tokenizer
from tfidf_similarity.config import settings

logger = logging.getLogger("tfidf_similarity.server")

# --------- App setup ---------
app = FastAPI(title="TF-IDF Similarity API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --------- Helpers (payloads are lightweight dicts) ---------

def _documents_from_payload(payload: Any) -> List[Document]:
    # Accept {"documents": [{"id": ..., "text": ...} | "raw text", ...]} or a bare list
    items = payload.get("documents") if isinstance(payload, dict) else payload
    if not isinstance(items, list) or not items:
        raise HTTPException(status_code=400, detail="documents is required (send JSON {\"documents\": [...]})")
    tokenizer = get_tokenizer(payload.get("tokenizer") if isinstance(payload, dict) else None)
    docs = []
    for i, item in enumerate(items):
        if isinstance(item, str):
            docs.append(Document(item, id=str(i), tokenizer=tokenizer))
        elif isinstance(item, dict):
            doc_id = item.get("id")
            docs.append(Document(
                item.get("text") or "",
                id=str(i) if doc_id is None else doc_id,
                tokens=item.get("tokens"),
                tokenizer=tokenizer,
            ))
        else:
            raise HTTPException(status_code=400, detail=f"documents[{i}] must be a string or an object")
    return docs


def _model_from_payload(payload: Any) -> Tuple[SimilarityModel, Dict[str, Any]]:
    opts = payload if isinstance(payload, dict) else {}
    try:
        docs = _documents_from_payload(payload)
        model = build_model(opts.get("model") or "tfidf", docs, backend=opts.get("backend") or settings.backend)
    except TfIdfSimilarityError as e:
        logger.warning("Rejected similarity request: %s", e)
        raise HTTPException(status_code=400, detail={"error": "invalid_configuration", "message": str(e)})
    return model, opts


@app.get("/api/health")
async def health():
    return {"status": "ok", "backend": settings.backend, "tokenizer": settings.tokenizer}


@app.post("/api/similarity")
async def api_similarity(payload: Any = Body(None)):
    model, _ = _model_from_payload(payload)
    return {
        "ids": [d.id for d in model.documents],
        "matrix": model.similarity_rows(),
    }


@app.post("/api/neighbors")
async def api_neighbors(payload: Any = Body(None)):
    model, opts = _model_from_payload(payload)
    target_id: Optional[Any] = opts.get("id")
    if target_id is None:
        raise HTTPException(status_code=400, detail="id is required")
    target = next((d for d in model.documents if d.id == target_id), None)
    if target is None:
        raise HTTPException(status_code=404, detail="not_found")
    top_k = int(opts.get("top_k") or settings.top_k)
    neighbors = model.most_similar(target, top_k=top_k)
    return {"id": target.id, "neighbors": [n.to_dict() for n in neighbors]}


@app.post("/api/terms")
async def api_terms(payload: Any = Body(None)):
    model, _ = _model_from_payload(payload)
    return {
        "document_count": model.document_count,
        "average_document_size": model.average_document_size,
        "terms": [s.to_dict() for s in model.term_stats()],
    }


# If run directly: uvicorn server:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host="0.0.0.0", port=8000, reload=True)
