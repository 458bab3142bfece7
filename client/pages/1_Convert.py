import json
import streamlit as st, requests
import api as API  # your client/api.py
from components import copy_to_clipboard, show_json, show_schema

st.title("🔁 Convert XML → JSON")

# ------------------------
# Session state
# ------------------------
if "sid" not in st.session_state:
    st.session_state.sid = API.new_session()["sessionId"]
if "reset_token" not in st.session_state:
    st.session_state.reset_token = 0
if "uploader_nonce" not in st.session_state:
    st.session_state.uploader_nonce = 0

sid = st.session_state.sid

# ------------------------
# Controls
# ------------------------
col1, col2 = st.columns(2)
with col1:
    allow_multiple = st.toggle("Allow multiple files", value=True, key="cv_multi")
with col2:
    show_schema_panel = st.toggle("Show schema", value=True, key="cv_visible")

try:
    state = API.update_session(sid, allow_multiple=allow_multiple, is_schema_visible=show_schema_panel)
except requests.HTTPError as e:
    if e.response is not None and e.response.status_code == 404:
        # API restarted; start a fresh session
        st.session_state.sid = API.new_session(
            allow_multiple=allow_multiple, is_schema_visible=show_schema_panel
        )["sessionId"]
        st.rerun()
    raise

files = st.file_uploader(
    "XML file(s)",
    type=["xml"],
    accept_multiple_files=allow_multiple,
    key=f"cv_upload_{st.session_state.uploader_nonce}",
)
if files is not None and not isinstance(files, list):
    files = [files]

cA, cB = st.columns(2)
with cA:
    if st.button("➡️ Convert", key="btn_convert", disabled=not files):
        try:
            state = API.upload(sid, files)
        except Exception as e:
            st.error(f"Conversion failed: {e}")
with cB:
    if st.button("↺ Reset", key="btn_reset"):
        # bump the token; the API treats any change as "clear output"
        st.session_state.reset_token += 1
        state = API.update_session(sid, reset=st.session_state.reset_token)
        st.session_state.uploader_nonce += 1  # new key -> empty uploader
        st.rerun()

# ------------------------
# Result panel
# ------------------------
if state.get("isSchemaVisible"):
    st.divider()
    has_result = bool(state.get("hasResult"))

    b1, b2 = st.columns(2)
    with b1:
        if st.button("Copy Schema", key="btn_copy", disabled=not has_result):
            if copy_to_clipboard(API.copy_text(sid)):
                st.toast("Schema copied")
    with b2:
        if st.button("Copy Schema With Prompt", key="btn_copy_prompt", disabled=not has_result):
            if copy_to_clipboard(API.copy_text(sid, with_prompt=True)):
                st.toast("Schema and prompt copied")

    show_schema(state.get("jsonResult"))

    if has_result:
        with st.expander("Parsed view"):
            show_json(json.loads(state["jsonResult"]))
