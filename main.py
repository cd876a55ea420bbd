"""Material palette generator web app (Flask).

Pick one seed colour; the page shows the ten Material weights (50–900)
derived from it in HSL and a ready-to-paste ``definePalette`` snippet.

Usage
-----
$ pip install -e .
$ python main.py                # starts on http://127.0.0.1:5000

Set ``MATERIAL_PALETTE_DEFAULT_SEED`` to change the colour shown on load.
"""

from material_palette.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True, threaded=True)
