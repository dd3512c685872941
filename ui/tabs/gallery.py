import hashlib
import streamlit as st
from streamlit_sortables import sort_items
from config import UPLOAD_EXTENSIONS
from core.images import collect_images
from core.utils import move_item, move_to, remove_at, reorder_by_labels

def sortable_labels(queue):
    """Rótulos únicos para o componente de arrastar (posição + nome)."""
    return [f"{pos+1}. {entry.name}" for pos, entry in enumerate(queue)]

def clear_queue():
    st.session_state.image_queue = []
    st.session_state.seen_image_keys = set()
    # Nova key zera o widget de upload
    st.session_state.uploader_nonce = st.session_state.get('uploader_nonce', 0) + 1

def render():
    st.header("🖼️ Imagens e Ordem")
    st.info("Selecione fotos ou digitalizações (PNG, JPG, WEBP, GIF, BMP). A ordem da lista abaixo é a ordem das páginas.")

    files = st.file_uploader(
        "Selecione as imagens",
        type=UPLOAD_EXTENSIONS,
        accept_multiple_files=True,
        key=f"uploader_{st.session_state.get('uploader_nonce', 0)}",
    )

    if files:
        new_entries, rejected = collect_images(files, st.session_state.seen_image_keys)
        st.session_state.image_queue.extend(new_entries)
        for name in rejected:
            st.toast(f"⚠️ Não foi possível ler '{name}'. Arquivo ignorado.")

    queue = st.session_state.image_queue
    if not queue:
        st.caption("Nenhuma imagem na lista.")
        return

    st.write(f"**{len(queue)}** imagem(ns) na lista.")

    def _move(pos, delta):
        move_item(st.session_state.image_queue, pos, delta)

    def _remove(pos):
        remove_at(st.session_state.image_queue, pos)

    def _jump(pos, widget_key):
        move_to(st.session_state.image_queue, pos, int(st.session_state[widget_key]) - 1)

    def _reverse():
        st.session_state.image_queue.reverse()

    b1, b2, _ = st.columns([0.2, 0.2, 0.6])
    b1.button("🔃 Inverter ordem", on_click=_reverse, disabled=len(queue) < 2)
    b2.button("🧹 Limpar lista", on_click=clear_queue)

    # Arrastar e soltar; a key muda com a ordem para o componente não devolver uma ordem antiga
    labels = sortable_labels(queue)
    order_digest = hashlib.md5("|".join(e.key for e in queue).encode()).hexdigest()[:12]
    st.caption("Arraste para reordenar (ou use os botões abaixo de cada miniatura).")
    dragged = sort_items(labels, direction="horizontal",
                         key=f"sortable_{st.session_state.get('uploader_nonce', 0)}_{order_digest}")
    reordered = reorder_by_labels(queue, labels, dragged)
    if [e.key for e in reordered] != [e.key for e in queue]:
        st.session_state.image_queue = reordered
        st.rerun()

    n_cols = st.sidebar.slider("Colunas da galeria", 2, 8, 4, key="gallery_cols")
    cols = st.columns(n_cols)
    for pos, entry in enumerate(queue):
        with cols[pos % n_cols]:
            st.image(entry.thumbnail, caption=f"{pos+1}. {entry.name} ({entry.size_label})", width="stretch")

            c_up, c_down, c_rm = st.columns(3)
            c_up.button("⬆️", key=f"up_{pos}_{entry.key}", on_click=_move, args=(pos, -1), disabled=pos == 0)
            c_down.button("⬇️", key=f"down_{pos}_{entry.key}", on_click=_move, args=(pos, 1), disabled=pos == len(queue) - 1)
            c_rm.button("🗑️", key=f"rm_{pos}_{entry.key}", on_click=_remove, args=(pos,))

            # Posição entra na key para o widget renascer com o valor certo após mover
            jump_key = f"pos_{pos}_{entry.key}"
            st.number_input(
                "Mover para", min_value=1, max_value=len(queue), value=pos + 1, step=1,
                key=jump_key, on_change=_jump, args=(pos, jump_key),
            )
