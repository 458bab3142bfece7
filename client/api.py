import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session()

def _parts(files):
    # streamlit UploadedFile -> multipart tuples, in selection order
    return [("files", (f.name, f.getvalue(), f.type or "application/xml")) for f in files]

def new_session(**opts):
    r=S.post(f"{API}/sessions",json=opts,timeout=10); r.raise_for_status(); return r.json()
def update_session(sid, **opts):
    r=S.patch(f"{API}/sessions/{sid}",json=opts,timeout=10); r.raise_for_status(); return r.json()

def upload(sid, files):
    r = S.post(f"{API}/sessions/{sid}/files", files=_parts(files), timeout=120)
    r.raise_for_status()
    return r.json()

def copy_text(sid, with_prompt=False):
    r = S.get(f"{API}/sessions/{sid}/copy", params={"with_prompt": bool(with_prompt)}, timeout=10)
    r.raise_for_status()
    return r.json().get("text")
