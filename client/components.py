# client/components.py
import json
import streamlit as st
import streamlit.components.v1 as st_components

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def show_schema(text: str | None, height: int = 320):
    """Read-only text area with the current JSON (empty when there is none)."""
    st.text_area("JSON", value=text or "", height=height, disabled=True)

# Browser-side copy: Clipboard API first, hidden <textarea> + execCommand if it is refused
_COPY_JS = """
<script>
(function () {
  const text = %s;
  function fallbackCopy(t) {
    const temp = document.createElement("textarea");
    temp.value = t;
    temp.setAttribute("readonly", "true");
    temp.style.position = "fixed";
    temp.style.left = "-9999px";
    temp.style.top = "0";
    document.body.appendChild(temp);
    temp.select();
    try { document.execCommand("copy"); } finally { document.body.removeChild(temp); }
  }
  const clip = window.parent.navigator.clipboard || navigator.clipboard;
  if (clip && clip.writeText) {
    clip.writeText(text).catch(function () { fallbackCopy(text); });
  } else {
    fallbackCopy(text);
  }
})();
</script>
"""

def copy_to_clipboard(text: str | None) -> bool:
    """Write `text` to the user's clipboard. No-op (False) for empty text."""
    if not text:
        return False
    payload = json.dumps(text).replace("</", "<\\/")  # keep </script> out of the inline script
    st_components.html(_COPY_JS % payload, height=0)
    return True
