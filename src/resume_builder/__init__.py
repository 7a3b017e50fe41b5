def main() -> None:
    """Entry point for the application: start the API development server."""
    from resume_builder.api.main import main as api_main

    api_main()
