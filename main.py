"""Top-level ASGI entrypoint: ``uvicorn main:app``."""

from coffee_skill_engine.api_factory import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
