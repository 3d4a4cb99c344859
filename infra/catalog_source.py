import logging
import os

import pandas as pd

from core.catalog import COMPOUNDS, CompoundRef, Role

logger = logging.getLogger("dyelab.catalog")

REQUIRED_COLUMNS = ["name", "role", "molecular_weight"]


def _read_catalog_csv(path):
    """Lê o CSV e limpa nomes/colunas, como o antigo loader de insumos."""
    df = pd.read_csv(path)
    df.columns = df.columns.str.strip()

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Colunas ausentes no catálogo: {missing}")

    df = df[df['name'].notna()].copy()
    df['name'] = df['name'].astype(str).str.strip()
    df = df[df['name'] != ""]

    initial_len = len(df)
    df = df.drop_duplicates(subset=['name'], keep='first')
    if len(df) < initial_len:
        logger.info(f"[CATALOG] Removidas {initial_len - len(df)} duplicatas.")

    df['molecular_weight'] = pd.to_numeric(df['molecular_weight'], errors='coerce')
    if 'display_color' not in df.columns:
        df['display_color'] = ""
    df['display_color'] = df['display_color'].fillna("").astype(str).str.strip()
    return df


def load_catalog(csv_path=None):
    """
    Carrega o catálogo de compostos.
    Sem CSV configurado (ou com CSV inválido) usa o catálogo embutido.
    """
    if not csv_path:
        return list(COMPOUNDS)

    if not os.path.exists(csv_path):
        logger.warning(f"[CATALOG] Arquivo não encontrado em {csv_path}. Usando catálogo embutido.")
        return list(COMPOUNDS)

    try:
        df = _read_catalog_csv(csv_path)
        compounds = []
        for _, row in df.iterrows():
            mw = row['molecular_weight']
            compounds.append(CompoundRef(
                name=row['name'],
                role=Role.parse(row['role']),
                molecular_weight=None if pd.isna(mw) else float(mw),
                display_color=row['display_color'],
            ))
    except Exception as e:
        logger.warning(f"[CATALOG] Falha ao ler {csv_path} ({e!r}). Usando catálogo embutido.")
        return list(COMPOUNDS)

    if not compounds:
        logger.warning(f"[CATALOG] {csv_path} está vazio. Usando catálogo embutido.")
        return list(COMPOUNDS)

    logger.info(f"[CATALOG] {len(compounds)} compostos carregados de {csv_path}.")
    return compounds
