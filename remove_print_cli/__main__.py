from remove_print_cli.cli import run

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    run()
