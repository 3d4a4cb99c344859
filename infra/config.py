import os
from dotenv import load_dotenv

load_dotenv()

# =========================================================
# CONFIGURAÇÃO GLOBAL
# =========================================================

# CSV opcional que substitui o catálogo embutido
CATALOG_CSV_PATH = os.getenv("CATALOG_CSV_PATH") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None
