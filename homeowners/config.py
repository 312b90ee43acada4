from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_CSV = DATA_DIR / "homeowners.csv"

CSV_EXTENSION = ".csv"
DEFAULT_OUTPUT_NAME = "homeowners_parsed"

# column order of every parsed record, on screen and on disk
OUTPUT_COLUMNS = ("Title", "First Name", "Initial", "Last Name")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
