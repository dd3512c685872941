import streamlit as st
import copy
import logging
from config import DEFAULT_BRAND, LOG_LEVEL
from ui.components import brand_header
from ui.tabs import gallery, converter

# --- Configuração Inicial ---
st.set_page_config(layout="wide", page_title="Conversor de Imagens para PDF")
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- Estado da Sessão ---
DEFAULT_STATE = {
    'image_queue': [],
    'seen_image_keys': set(),
    'brand': DEFAULT_BRAND.copy(),
    'brand_high_contrast': False,
}

def initialize_session_state():
    """Reseta o estado da sessão."""
    dyn = [k for k in st.session_state.keys()
           if k.startswith(("up_", "down_", "rm_", "pos_", "conv_"))]
    for k in dyn: st.session_state.pop(k, None)

    for k, v in DEFAULT_STATE.items():
        if k == "brand":
            st.session_state[k] = DEFAULT_BRAND.copy()
        else:
            st.session_state[k] = copy.deepcopy(v)
    # Nova key zera o widget de upload
    st.session_state.uploader_nonce = st.session_state.get('uploader_nonce', 0) + 1

if 'initialized_once' not in st.session_state:
    initialize_session_state()
    st.session_state.initialized_once = True

# --- Sidebar ---
with st.sidebar:
    st.subheader("🎨 Aparência")
    st.session_state.brand_high_contrast = st.toggle("Modo alto contraste", value=st.session_state.get('brand_high_contrast', False))

    st.divider()
    st.button("🔄 Limpar Tudo e Recomeçar", on_click=initialize_session_state, type="primary")
    st.caption("Dica: use a pré-visualização para conferir margens e ordem antes de baixar.")

# --- Header ---
brand_header(st.session_state.brand, st.session_state.brand_high_contrast)

st.title("📸 Conversor de Imagens para PDF")

tab_imgs, tab_pdf = st.tabs(["Imagens", "Gerar PDF"])

with tab_imgs:
    gallery.render()

with tab_pdf:
    converter.render()
