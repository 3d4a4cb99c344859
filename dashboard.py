import streamlit as st
import plotly.graph_objects as go

from core.calculator import EXCESS_PRECURSOR, MOLE_MATCH, InvalidCompound
from core.catalog import Role, by_role, get_compound, option_label
from core.formulation import Formulation
from infra import config
from infra.catalog_source import load_catalog
from infra.logging_config import setup_logging

st.set_page_config(
    page_title="Hair Dye Mole Ratio Calculator",
    page_icon="🧪",
    layout="wide"
)

st.markdown("""
<style>
    .shade-swatch {
        width: 6rem;
        height: 2.5rem;
        border-radius: 6px;
        box-shadow: 0 2px 6px rgba(0,0,0,0.25);
        margin: 0.5rem 0 1rem 0;
    }
    .color-dot {
        display: inline-block;
        width: 0.7em;
        height: 0.7em;
        border-radius: 50%;
        margin-right: 6px;
    }
</style>
""", unsafe_allow_html=True)

GROUPS = [(Role.PRECURSOR, "Precursor"), (Role.COUPLER, "Coupler")]


# =========================================================
# 1. CACHE DE RECURSOS
# =========================================================
@st.cache_resource
def init_logging():
    return setup_logging(config.LOG_LEVEL, config.LOG_FILE)


@st.cache_data
def get_catalog(csv_path):
    return load_catalog(csv_path)


logger = init_logging()
catalog = get_catalog(config.CATALOG_CSV_PATH)

# =========================================================
# 2. GERENCIAMENTO DE ESTADO (Session State)
# =========================================================
if 'formulation' not in st.session_state:
    st.session_state.formulation = Formulation()


def _slug(role):
    return role.name.lower()


def _grams_text(grams):
    return f"{grams:g}" if float(grams).is_integer() else str(grams)


def _clear_row_keys(role):
    prefix = f"grams_{_slug(role)}_"
    for key in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
        del st.session_state[key]


# =========================================================
# 3. CALLBACKS
# =========================================================
def add_compound(role, compounds):
    slug = _slug(role)
    name = st.session_state.get(f"select_{slug}")
    raw = st.session_state.get(f"grams_input_{slug}", "")

    before = st.session_state.formulation
    after = before.add_raw(get_compound(name, compounds), raw)
    if after is before:
        logger.debug(f"[FORM] Entrada ignorada: compound={name!r} grams={raw!r}")
    else:
        logger.info(f"[FORM] {role.value} adicionado: {name} ({raw} g)")

    st.session_state.formulation = after
    st.session_state[f"grams_input_{slug}"] = ""


def update_line(role, index):
    key = f"grams_{_slug(role)}_{index}"
    formulation = st.session_state.formulation.update_grams(role, index, st.session_state.get(key))
    st.session_state.formulation = formulation

    entries = formulation.entries(role)
    if index < len(entries):
        st.session_state[key] = _grams_text(entries[index].grams)


def remove_line(role, index):
    entries = st.session_state.formulation.entries(role)
    if index < len(entries):
        logger.info(f"[FORM] {role.value} removido: {entries[index].compound.name}")
    st.session_state.formulation = st.session_state.formulation.remove(role, index)
    _clear_row_keys(role)


# =========================================================
# 4. COMPONENTES
# =========================================================
def render_table(role):
    entries = st.session_state.formulation.entries(role)
    if not entries:
        st.caption("No entries yet.")
        return

    widths = [4, 1.3, 1.8, 1.3, 1.4]
    header = st.columns(widths)
    for col, title in zip(header, ["Name", "MW", "Grams", "Moles", "Action"]):
        col.markdown(f"**{title}**")

    slug = _slug(role)
    for index, entry in enumerate(entries):
        key = f"grams_{slug}_{index}"
        if key not in st.session_state:
            st.session_state[key] = _grams_text(entry.grams)

        try:
            moles_text = f"{entry.moles:.4f}"
        except InvalidCompound:
            moles_text = "n/a"

        c_name, c_mw, c_grams, c_moles, c_action = st.columns(widths)
        c_name.markdown(
            f"<span class='color-dot' style='background-color:{entry.compound.display_color};'></span>"
            f"{entry.compound.name}",
            unsafe_allow_html=True
        )
        c_mw.write(entry.compound.molecular_weight)
        c_grams.text_input(
            "Grams",
            key=key,
            label_visibility="collapsed",
            on_change=update_line,
            args=(role, index)
        )
        c_moles.write(moles_text)
        c_action.button(
            "Delete",
            key=f"delete_{slug}_{index}",
            on_click=remove_line,
            args=(role, index)
        )


def render_group(role, title):
    compounds = by_role(role, catalog)
    names = [c.name for c in compounds]
    slug = _slug(role)

    st.subheader(f"Select {title}")
    st.selectbox(
        f"Select {title}",
        options=names,
        index=None,
        placeholder=f"Select {title}",
        format_func=lambda n: option_label(get_compound(n, compounds)),
        key=f"select_{slug}",
        label_visibility="collapsed"
    )
    st.text_input(
        "Grams",
        placeholder="Enter grams",
        key=f"grams_input_{slug}",
        label_visibility="collapsed"
    )
    st.button(f"Add {title}", key=f"add_{slug}", on_click=add_compound, args=(role, compounds))
    render_table(role)


def shade_caption(result):
    if result.shade_label == MOLE_MATCH.label:
        return f"✅ {result.shade_label}."
    if result.shade_label == EXCESS_PRECURSOR.label:
        return f"❗ {result.shade_label}."
    return f"Predicted Shade: {result.shade_label}"


def moles_chart(result):
    frame = result.chart_frame()
    fig = go.Figure(go.Bar(x=frame["name"], y=frame["moles"], marker_color="#8884d8"))
    fig.update_layout(yaxis_title="Moles", height=320, margin=dict(l=20, r=20, t=20, b=20))
    return fig


# =========================================================
# 5. ÁREA PRINCIPAL
# =========================================================
st.title("🧪 Hair Dye Mole Ratio Calculator")

col1, col2 = st.columns(2)
for column, (role, title) in zip((col1, col2), GROUPS):
    with column:
        with st.container(border=True):
            render_group(role, title)

st.divider()

# Script reroda a cada clique; o botão só força o recálculo
st.button("Recalculate", key="recalculate")

try:
    result = st.session_state.formulation.result()
except InvalidCompound as e:
    logger.error(f"[FORM] Catálogo inválido: {e}")
    st.error(f"Invalid catalog entry: {e.compound_name} has no positive molecular weight.")
    st.stop()

st.markdown(f"### Mole Ratio (Coupler / Precursor): {result.ratio:.2f}")
st.markdown(shade_caption(result))
st.markdown(
    f"<div class='shade-swatch' style='background-color:{result.shade_color};'></div>",
    unsafe_allow_html=True
)
st.plotly_chart(moles_chart(result), use_container_width=True)
