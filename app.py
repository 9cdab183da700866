"""BetaOthello: Gradio web app entry point."""

import logging

import gradio as gr

from betaothello.ui.board_component import CLICK_JS
from betaothello.ui.play_tab import build_play_tab

with gr.Blocks(title="BetaOthello") as demo:
    gr.Markdown("# BetaOthello")
    gr.Markdown("Othello on an 8x8 board against a friend or an alpha-beta search agent.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=CLICK_JS)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo.launch(theme=gr.themes.Soft())
