"""Entry point for running the shift board web application."""

from shiftboard import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
