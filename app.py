"""Tic Tac Toe — Gradio web app entry point."""

import gradio as gr

from tictactoe.ui.board_component import BOARD_CLICK_JS
from tictactoe.ui.play_tab import build_play_tab

with gr.Blocks(title="Tic Tac Toe") as demo:
    gr.Markdown("# Tic Tac Toe")
    gr.Markdown("Odd N x N grid against the computer. First to 3 round wins takes the match.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
