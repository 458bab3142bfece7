# client/streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="XML → JSON", layout="wide")
st.title("🧩 XML → JSON Client")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **🔁 Convert** — Upload one or more XML files and POST them to the API. Each file becomes `{fileName, content}` or `{fileName, error}`; one bad file never spoils the rest. Copy the result as-is, or with the Power Apps prompt in front.
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            r = requests.get(f"{api_url}/healthz", timeout=5)
            st.success(r.json())
        except Exception as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before starting Streamlit.")
