def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from folio_builder.api.main import main as serve

    serve()
    return 0
