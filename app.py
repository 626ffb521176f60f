# app.py

import hashlib
import io
import json
import logging

import streamlit as st

from data_loader import load_resume_bytes
from nlp.parser import set_debug
from services.resume_intake import (
    STATUS_MANUAL_INPUT,
    STATUS_PARSED,
    STATUS_UNSUPPORTED,
    intake_resume_text,
)
from services.settings import parser_debug_enabled

st.set_page_config(page_title="CV Forge Resume Import", page_icon="🧾", layout="wide")
st.title("CV Forge")
st.caption("Import an existing resume to pre-fill the builder form.")

uploaded = st.file_uploader("Upload your resume (TXT; PDF/DOCX need pasted text)", type=["txt", "pdf", "doc", "docx"])
debug_enabled = st.checkbox("Enable parser debug logs", value=parser_debug_enabled())

text = ""
if uploaded is not None:
    text = load_resume_bytes(uploaded.name, uploaded.getvalue())

pasted = st.text_area("…or paste the resume text", height=250, key="pasted_text")
if pasted.strip():
    text = pasted


def _run_intake(resume_text: str):
    log_buffer = io.StringIO()
    handler = logging.StreamHandler(log_buffer)
    handler.setFormatter(logging.Formatter("%(message)s"))
    nlp_logger = logging.getLogger("nlp")
    nlp_logger.addHandler(handler)
    try:
        set_debug(debug_enabled)
        outcome = intake_resume_text(resume_text)
    finally:
        set_debug(False)
        nlp_logger.removeHandler(handler)
    return outcome, log_buffer.getvalue()


if text:
    # debug toggle is part of the key so enabling it re-runs the parse for the Logs tab
    text_hash = hashlib.sha1(text.encode("utf-8")).hexdigest()
    cache_key = (text_hash, debug_enabled)
    if st.session_state.get("_resume_key") != cache_key:
        st.session_state["_resume_key"] = cache_key
        outcome, log_output = _run_intake(text)
        st.session_state["intake"] = outcome
        st.session_state["last_parse_log"] = log_output

    outcome = st.session_state.get("intake") or {}
    log_output = st.session_state.get("last_parse_log", "")
    status = outcome.get("status")

    col_main, col_logs = st.columns([2, 1], gap="large")

    with col_main:
        if status == STATUS_PARSED:
            parsed_data = outcome["data"]
            st.success("Resume parsed. Review the fields below before editing.")
            info = parsed_data["personal_info"]
            st.subheader(info.get("name") or "Name not found")
            if info.get("title"):
                st.caption(info["title"])
            st.markdown(f"{info.get('email') or '-'} | {info.get('phone') or '-'}")

            st.subheader("Structured Resume Snapshot")
            st.json(parsed_data)
            st.download_button(
                "Download as .json",
                data=json.dumps(parsed_data, indent=2, ensure_ascii=False),
                file_name="parsed_resume.json",
            )
        elif status in (STATUS_MANUAL_INPUT, STATUS_UNSUPPORTED):
            st.warning(outcome.get("message"))
        else:
            st.warning(outcome.get("message") or "Please fill in the resume form manually.")

    with col_logs:
        log_tab, = st.tabs(["Logs"])
        with log_tab:
            if log_output.strip():
                st.code(log_output.rstrip())
            elif debug_enabled:
                st.info("No debug output was produced for this resume.")
            else:
                st.info("Enable parser debug logs to see step-by-step output here.")
