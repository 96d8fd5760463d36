# streamlit_app.py
import streamlit as st
import requests

from tablegen.client import TableApiClient, TableApiError
from tablegen.forms import DEFAULT_FORM
from tablegen.renderer import EXPORT_FILENAME

BORDER_STYLES = ["none", "horizontal", "full"]
FONT_STYLES = ["normal", "bold"]

st.set_page_config(page_title="LaTeX Table Generator", layout="wide")
st.title("LaTeX Table Generator")
st.write("Pick the size and style of the table, then generate the LaTeX code and a live preview.")

client = TableApiClient()

# -------------------------
# Helpers
# -------------------------
def load_form_state():
    """Fill the form from saved settings once per session; fall back to defaults if the API is down."""
    if st.session_state.get("form_loaded"):
        return
    try:
        saved = client.load_settings()
    except (requests.RequestException, TableApiError):
        saved = {}
    for name, default in DEFAULT_FORM.items():
        value = saved.get(name)
        st.session_state[name] = default if value is None else value
    st.session_state["rows"] = str(st.session_state["rows"])
    st.session_state["columns"] = str(st.session_state["columns"])
    # a stale saved choice would make the selectbox raise
    if st.session_state["style"] not in BORDER_STYLES:
        st.session_state["style"] = DEFAULT_FORM["style"]
    if st.session_state["font_style"] not in FONT_STYLES:
        st.session_state["font_style"] = DEFAULT_FORM["font_style"]
    st.session_state.setdefault("latex_output", "")
    st.session_state.setdefault("latex_preview", "")
    st.session_state["form_loaded"] = True


def current_form():
    return {name: st.session_state[name] for name in DEFAULT_FORM}


def reset_form():
    for name, default in DEFAULT_FORM.items():
        st.session_state[name] = default
    st.session_state["latex_output"] = ""
    st.session_state["latex_preview"] = ""


def generate_table():
    try:
        full, preview = client.generate(current_form())
    except TableApiError as e:
        # previous output stays on screen
        st.session_state["error"] = e.detail
        return
    except requests.RequestException as e:
        st.session_state["error"] = f"Failed to call API: {e}"
        return
    st.session_state["error"] = None
    st.session_state["latex_output"] = full
    st.session_state["latex_preview"] = preview


# -------------------------
# UI: form
# -------------------------
load_form_state()

with st.form("tableForm"):
    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Rows", key="rows")
        st.text_input("Columns", key="columns")
        st.selectbox("Border style", BORDER_STYLES, key="style")
        st.selectbox("Font style", FONT_STYLES, key="font_style")
    with col2:
        st.checkbox("Header row", key="has_header")
        st.checkbox("Number rows automatically", key="auto_number")
        st.checkbox("Numeric cells (random values)", key="is_numeric")
    st.form_submit_button("Generate", on_click=generate_table)

st.button("Reset", on_click=reset_form)

if st.session_state.get("error"):
    st.error(st.session_state["error"])

# -------------------------
# UI: output
# -------------------------
if st.session_state["latex_output"]:
    st.subheader("LaTeX code")
    # st.code renders a copy-to-clipboard button
    st.code(st.session_state["latex_output"], language="latex")
    st.download_button(
        "Download .tex",
        data=st.session_state["latex_output"].encode("utf-8"),
        file_name=EXPORT_FILENAME,
        mime="text/plain",
    )

    st.subheader("Preview")
    st.caption("At most 5 rows and 5 columns are shown.")
    st.latex(st.session_state["latex_preview"])
else:
    st.info("Set the table options and click 'Generate'.")
