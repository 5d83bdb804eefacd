"""Command-line interface."""
from clinicbook.main import main


if __name__ == "__main__":
    main()
