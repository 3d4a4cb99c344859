import logging

from core.calculator import InvalidCompound
from core.catalog import Role, by_role, option_label
from core.formulation import Formulation, entries_frame, parse_grams
from infra import config
from infra.catalog_source import load_catalog
from infra.logging_config import setup_logging

logger = logging.getLogger("dyelab.main")

HELP = """
 Comandos:
   p <n> <gramas>      adiciona o n-ésimo precursor
   c <n> <gramas>      adiciona o n-ésimo coupler
   u p|c <i> <gramas>  altera as gramas da linha i
   d p|c <i>           remove a linha i
   l                   lista o catálogo
   q                   sair
"""

ROLE_KEYS = {"p": Role.PRECURSOR, "c": Role.COUPLER}


def print_catalog(catalog):
    for key, role in ROLE_KEYS.items():
        print(f"\n[{key}] {role.value}")
        for i, compound in enumerate(by_role(role, catalog), start=1):
            print(f"   {i:>2}. {option_label(compound)}")


def print_formulation(formulation):
    for key, role in ROLE_KEYS.items():
        frame = entries_frame(formulation.entries(role))
        print(f"\n {role.value} ({len(frame)})")
        for i, row in enumerate(frame.itertuples(index=False), start=1):
            print(f"   {i:>2}. {row.Name:<45} {row.Grams:>9.3f} g  {row.Moles:.4f} mol")

    result = formulation.result()
    print("-" * 60)
    print(f" Mole Ratio (Coupler / Precursor): {result.ratio:.2f}")
    print(f" Predicted Shade: {result.shade_label} ({result.shade_color})")
    for point in result.chart_series:
        print(f"   {point['name']:<10} {point['moles']:.4f} mol")


def _index(text, size):
    """Índice 1-based digitado pelo usuário -> 0-based, ou None."""
    try:
        i = int(text) - 1
    except ValueError:
        return None
    return i if 0 <= i < size else None


def apply_command(formulation, line, catalog):
    parts = line.split()
    cmd = parts[0].lower()

    if cmd in ROLE_KEYS and len(parts) == 3:
        compounds = by_role(ROLE_KEYS[cmd], catalog)
        i = _index(parts[1], len(compounds))
        if i is None or parse_grams(parts[2]) is None:
            print(" ⚠️  Composto ou gramas inválidos.")
            return formulation
        return formulation.add_raw(compounds[i], parts[2])

    if cmd in ("u", "d") and len(parts) >= 3 and parts[1].lower() in ROLE_KEYS:
        role = ROLE_KEYS[parts[1].lower()]
        i = _index(parts[2], len(formulation.entries(role)))
        if i is None:
            print(" ⚠️  Linha inexistente.")
            return formulation
        if cmd == "d":
            return formulation.remove(role, i)
        if len(parts) == 4 and parse_grams(parts[3]) is not None:
            return formulation.update_grams(role, i, parts[3])
        print(" ⚠️  Gramas inválidas.")
        return formulation

    print(" ⚠️  Comando não reconhecido.")
    print(HELP)
    return formulation


def run(input_fn=input, catalog=None):
    if catalog is None:
        catalog = load_catalog(config.CATALOG_CSV_PATH)
    logger.info(f"[MAIN] {len(catalog)} compostos no catálogo.")

    formulation = Formulation()
    print("\n🧪 Hair Dye Mole Ratio Calculator")
    print(HELP)

    while True:
        try:
            line = input_fn(" > ").strip()
        except EOFError:
            break

        if not line:
            continue
        if line.lower() in ['q', 'exit']:
            break
        if line.lower() == 'l':
            print_catalog(catalog)
            continue

        formulation = apply_command(formulation, line, catalog)
        try:
            print_formulation(formulation)
        except InvalidCompound as e:
            print(f" ❌ {e}")

    return formulation


if __name__ == "__main__":
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    try:
        run()
    except KeyboardInterrupt:
        print("\n🛑 Encerrando.")
    print("👋 Bye.")
