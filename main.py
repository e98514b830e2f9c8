"""
main.py — Bootstrap

1. Load tuning values
2. Create the app window
3. Push the play scene
4. Run
"""

from core import tuning
from core.app import App
from core.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_FPS, WINDOW_TITLE
from scenes.play_scene import PlayScene


def main():
    tuning.load()

    app = App(
        title=tuning.get("window", "title", WINDOW_TITLE),
        width=int(tuning.get("window", "width", WINDOW_WIDTH)),
        height=int(tuning.get("window", "height", WINDOW_HEIGHT)),
        fps=int(tuning.get("window", "fps", WINDOW_FPS)),
    )
    print(f"[MAIN] Window {app.width}x{app.height} @ {app.fps} fps")

    app.push_scene(PlayScene())
    app.run()


if __name__ == "__main__":
    main()
