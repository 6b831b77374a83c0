# run.py
import logging

from fitdiet import create_app

logging.basicConfig(level=logging.INFO)

# create_app also starts the weekly report scheduler when SCHEDULER_ENABLED is set,
# so `python run.py`, `flask --app run run` and WSGI servers all schedule it
app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])
