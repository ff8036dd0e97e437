import json
import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests.

    The CLI reconfigures the root logger; this keeps that from leaking into
    other tests or touching closed streams during cleanup.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)


@pytest.fixture
def resume_dict() -> dict[str, object]:
    return {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "phone": "555-0100",
        "linkedin": "linkedin.com/in/janedoe",
        "github": "https://github.com/janedoe",
        "summary": "Backend engineer focused on data pipelines.",
        "skills": [{"category": "Languages", "skills": "Python, SQL"}],
        "experience": [
            {
                "company": "Acme",
                "location": "Berlin",
                "role": "Engineer",
                "duration": "2020-2024",
                "points": "Built ETL jobs, Cut costs by 30%, ",
            }
        ],
        "education": [
            {
                "institution": "TU Berlin",
                "location": "Berlin",
                "degree": "MSc Computer Science",
                "year": "2019",
                "performance": "",
            }
        ],
        "projects": [{"title": "resumefit", "subtitle": "CLI", "description": "PDF export"}],
        "certifications": [{"title": "AWS SAA", "description": "2022"}],
        "customSections": [],
    }


@pytest.fixture
def resume_json(tmp_path: Path, resume_dict: dict[str, object]) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(resume_dict), encoding="utf-8")
    return path
