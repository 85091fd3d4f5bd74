from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from tfidf_similarity import Document, TfIdfSimilarityError, build_model, get_tokenizer
from tfidf_similarity.config import settings
from tfidf_similarity.data_loader import load_directory, load_texts

logger = logging.getLogger("tfidf_similarity.cli")


def _load_documents(args) -> List[Document]:
    tokenizer = get_tokenizer(args.tokenizer)
    if args.text:
        return load_texts(args.text, ids=[str(i) for i in range(len(args.text))], tokenizer=tokenizer)
    return load_directory(Path(args.dataset_dir), pattern=args.pattern, tokenizer=tokenizer)


def _build(args):
    docs = _load_documents(args)
    logger.info("Loaded %d documents", len(docs))
    return build_model(args.model, docs, backend=args.backend)


def cmd_matrix(args):
    model = _build(args)
    ids = [d.id for d in model.documents]
    rows = model.similarity_rows()
    if getattr(args, "json", False):
        print(json.dumps({"ids": ids, "matrix": rows}, ensure_ascii=False))
        return
    if not ids:
        print("No documents.")
        return
    width = max(len(str(i)) for i in ids)
    print(" " * width + " " + " ".join(f"{str(i):>8}" for i in ids))
    for doc_id, row in zip(ids, rows):
        print(f"{str(doc_id):>{width}} " + " ".join(f"{x:8.4f}" for x in row))


def cmd_terms(args):
    model = _build(args)
    stats = model.term_stats()
    if getattr(args, "json", False):
        print(json.dumps({
            "document_count": model.document_count,
            "average_document_size": model.average_document_size,
            "terms": [s.to_dict() for s in stats],
        }, ensure_ascii=False))
        return
    print(f"Documents: {model.document_count}")
    print(f"Average document size: {model.average_document_size:.2f}")
    print(f"Terms: {len(stats)}")
    for s in stats:
        print(f"- {s.term}: df={s.document_frequency} count={s.term_count} idf={s.idf:.4f}")


def cmd_neighbors(args):
    model = _build(args)
    target = next((d for d in model.documents if str(d.id) == args.id), None)
    if target is None:
        if getattr(args, "json", False):
            print(json.dumps({"error": "not_found", "id": args.id}))
        else:
            print(f"No document with id {args.id!r}.")
        return
    neighbors = model.most_similar(target, top_k=args.top_k)
    if getattr(args, "json", False):
        print(json.dumps({"id": target.id, "neighbors": [n.to_dict() for n in neighbors]}, ensure_ascii=False))
        return
    print(f"Nearest documents to {target.id}:")
    for n in neighbors:
        print(f"- {n.document.id}: {n.score:.4f}")


def _add_corpus_args(p: argparse.ArgumentParser):
    p.add_argument("--text", action="append", help="Inline document text; repeat for more documents (ids are 0, 1, ...)")
    p.add_argument("--dataset-dir", default=".", help="Directory of text files, one document per file")
    p.add_argument("--pattern", default="*.txt", help="Glob for files under --dataset-dir")
    p.add_argument("--model", choices=["tfidf", "bm25"], default="tfidf")
    p.add_argument("--backend", default=settings.backend, help="Matrix backend: numpy, scipy or python")
    p.add_argument("--tokenizer", default=settings.tokenizer, help="Tokenizer: unicode or naive")
    p.add_argument("--json", action="store_true", help="Output results as JSON")


def main(argv=None):
    ap = argparse.ArgumentParser(description="TF-IDF document similarity CLI")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(required=True)

    ap_matrix = sub.add_parser("matrix", help="Print the document similarity matrix")
    _add_corpus_args(ap_matrix)
    ap_matrix.set_defaults(func=cmd_matrix)

    ap_terms = sub.add_parser("terms", help="Print the vocabulary with document frequencies")
    _add_corpus_args(ap_terms)
    ap_terms.set_defaults(func=cmd_terms)

    ap_nb = sub.add_parser("neighbors", help="Print the documents most similar to one document")
    ap_nb.add_argument("id", help="Document id (file stem, or index of --text)")
    ap_nb.add_argument("--top-k", type=int, default=settings.top_k)
    _add_corpus_args(ap_nb)
    ap_nb.set_defaults(func=cmd_neighbors)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except TfIdfSimilarityError as e:
        ap.exit(2, f"error: {e}\n")


if __name__ == "__main__":
    main()
