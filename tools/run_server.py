#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

# Asegura que el repo raíz está en sys.path aunque no se exporte PYTHONPATH=.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import uvicorn
from ingredient_dedup.config import settings

def main():
    ap = argparse.ArgumentParser(description="Arranca la API de desduplicado (uvicorn)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--reload", action="store_true", help="Recarga automática (sólo dev)")
    args = ap.parse_args()

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("ingredient_dedup.main:app", host=args.host, port=args.port,
                reload=args.reload, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
