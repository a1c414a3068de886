# -*- coding: utf-8 -*-
"""
Run on a free port, e.g.:
  python -m streamlit run textanalyzer/app/ui_streamlit.py --server.port 8503
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from textanalyzer.analysis.types import AnalysisRequestError, AnalysisResult, AuthorLikelihood
from textanalyzer.app.controller import AppController
from textanalyzer.app.formatting import (
    empty_results_hint,
    mode_label,
    probability_band,
    probability_color,
    text_stats,
    truncate_text,
)
from textanalyzer.ingestion.ocr import TextExtractionError
from textanalyzer.memory.history_store import HistoryEntry, HistoryStoreError
from textanalyzer.orchestration.llm_client import AnalysisUnavailable

_BAND_MARK = {"high": "[!]", "medium": "[?]", "low": "[ok]"}
# streamlit markdown has no amber
_ST_COLOR = {"red": "red", "orange": "orange", "amber": "orange", "green": "green"}


def _init_state() -> None:
    # one controller per user session
    if "controller" not in st.session_state:
        try:
            st.session_state.controller = AppController()
        except HistoryStoreError as exc:
            st.error(f"{exc}. Fix or remove the file and reload the page.")
            st.stop()
    st.session_state.setdefault("question", "")
    st.session_state.setdefault("answer_text", "")
    st.session_state.setdefault("judging_criteria", "")
    st.session_state.setdefault("is_critical_mode", True)
    st.session_state.setdefault("results", None)
    st.session_state.setdefault("error", None)


def _on_analyze() -> None:
    ctrl: AppController = st.session_state.controller
    st.session_state.error = None
    st.session_state.results = None
    try:
        st.session_state.results = ctrl.analyze(
            question=st.session_state.question,
            answer_text=st.session_state.answer_text,
            judging_criteria=st.session_state.judging_criteria,
            is_critical_mode=st.session_state.is_critical_mode,
        )
    except AnalysisRequestError as exc:
        st.session_state.error = str(exc)
    except AnalysisUnavailable:
        st.session_state.error = "Failed to analyze text. Please try again."


def _on_load_entry(entry_id: str) -> None:
    ctrl: AppController = st.session_state.controller
    entry: Optional[HistoryEntry] = ctrl.load_entry(entry_id)
    if entry is None:
        return
    st.session_state.question = entry.request.question
    st.session_state.answer_text = entry.request.answer_text
    st.session_state.judging_criteria = entry.request.judging_criteria or ""
    st.session_state.is_critical_mode = entry.request.mode.is_critical
    st.session_state.results = entry.result
    st.session_state.error = None


def _on_clear_history() -> None:
    st.session_state.controller.clear_history()


def _render_input() -> None:
    st.subheader("Text Input")
    st.text_area("Original Question/Prompt *", key="question", height=110)

    uploaded = st.file_uploader("Extract answer text from an image (optional)", type=["png", "jpg", "jpeg", "webp"])
    if uploaded is not None and st.button("Extract Text", use_container_width=True):
        try:
            st.session_state.answer_text = st.session_state.controller.extract_text(uploaded.getvalue())
            st.rerun()
        except TextExtractionError as exc:
            st.session_state.error = str(exc)

    st.text_area("Response Text to Analyze *", key="answer_text", height=220)
    chars, words = text_stats(st.session_state.answer_text)
    st.caption(f"{chars} characters | {words} words")

    st.text_input("Judging Criteria (optional)", key="judging_criteria")
    st.toggle("Critical mode", key="is_critical_mode", help="Off = generous mode")

    if st.session_state.error:
        st.error(st.session_state.error)

    label = f"Perform {mode_label(st.session_state.is_critical_mode)} Analysis"
    st.button(label, type="primary", use_container_width=True, on_click=_on_analyze)


def _render_results(results: Optional[AnalysisResult]) -> None:
    st.subheader("Analysis Results")
    if results is None:
        st.info(empty_results_hint(st.session_state.is_critical_mode))
        return

    p = results.ai_probability
    st.markdown(
        f"**AI Generation Probability** {_BAND_MARK[probability_band(p)]} "
        f":{_ST_COLOR[probability_color(p)]}[**{p}%**]"
    )
    st.progress(p / 100, text="Human-like  ←→  AI-generated")

    c1, c2 = st.columns(2)
    c1.markdown(f"**Writing Style**  \n:blue-background[{results.writing_style.value}]")
    c2.markdown(f"**Writing Approach**  \n:green-background[{results.writing_approach.value}]")
    c3, c4 = st.columns(2)
    c3.markdown(f"**Competence Level**  \n:violet-background[{results.competence_level.value}]")
    author_color = "green" if results.author_likelihood is AuthorLikelihood.HUMAN else "red"
    c4.markdown(f"**Author Classification**  \n:{author_color}-background[{results.author_likelihood.value}]")

    st.markdown("**Analysis Commentary**")
    st.write(results.comments)


def _render_history() -> None:
    ctrl: AppController = st.session_state.controller
    history = ctrl.history()
    if not history:
        st.info("Your analysis history will appear here once you start analyzing texts")
        return

    head_l, head_r = st.columns([4, 1])
    head_l.subheader("Analysis History")
    head_r.button("Clear History", on_click=_on_clear_history, use_container_width=True)

    for entry in history:
        res = entry.result
        with st.container(border=True):
            top_l, top_r = st.columns([3, 1])
            top_l.markdown(f"**Analysis #{entry.id[-6:]}**")
            top_r.markdown(
                f"{mode_label(entry.request.mode.is_critical)} "
                f":{_ST_COLOR[probability_color(res.ai_probability)]}[**{res.ai_probability}%**]"
            )
            st.caption(f"Question: {truncate_text(entry.request.question, 150)}")
            st.caption(f"Analyzed Text: {truncate_text(entry.request.answer_text, 200)}")
            st.markdown(
                " · ".join(
                    [
                        res.writing_style.value,
                        res.writing_approach.value,
                        res.competence_level.value,
                        res.author_likelihood.value,
                    ]
                )
            )
            st.button(
                "Load This Analysis",
                key=f"load_{entry.id}",
                on_click=_on_load_entry,
                args=(entry.id,),
            )


def main() -> None:
    st.set_page_config(page_title="Academic Text Analyzer", layout="wide")
    _init_state()

    st.title("Academic Text Analyzer")
    st.caption("AI detection and writing analysis with critical or generous standards")

    tab_analyze, tab_history = st.tabs(["Analyze", "History"])
    with tab_analyze:
        col_left, col_right = st.columns(2, gap="large")
        with col_left:
            _render_input()
        with col_right:
            _render_results(st.session_state.results)
    with tab_history:
        _render_history()


if __name__ == "__main__":
    main()
