import json
import logging
import os
import sys

from .core import RegistryCache


logging.basicConfig(
  level=getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
  format="%(asctime)s %(levelname)s:%(name)s: %(message)s"
)

registry = RegistryCache.get_default().get(sys.argv[1] if len(sys.argv) > 1 else None)
json.dump(registry.serialize(), sys.stdout, ensure_ascii=False, separators=(',', ':'))
