"""
Pytest fixtures and configuration for SEO Keyword Engine tests.
"""

import pytest
from pathlib import Path

from seo_keyword_engine.analysis import SeoAnalyzer
from seo_keyword_engine.config import EngineConfig


SAMPLE_ARTICLE = """# Email Marketing Basics

Email marketing helps small businesses reach customers directly. A good email marketing plan starts with a clean list and a clear goal. However, many teams send messages without testing subject lines first.

- Segment your audience
- Test every subject line

Strong campaigns respect the reader. Therefore, keep each message short, useful and honest. Visit https://example.com for templates that make email marketing easier for growing brands.
"""


@pytest.fixture
def sample_article() -> str:
    """A short markdown article with headings, a list and a link."""
    return SAMPLE_ARTICLE


@pytest.fixture
def plain_paragraph() -> str:
    """Several plain sentences without any marketing keywords."""
    return (
        "Our team builds tools for small shops. "
        "We help owners plan their next year with care, and we listen closely. "
        "Every plan starts with a clear budget and honest numbers. "
        "Owners then review the results each month."
    )


@pytest.fixture
def local_config() -> EngineConfig:
    """Config with enrichment disabled and deterministic placeholders."""
    return EngineConfig.local_only(metrics_seed=7)


@pytest.fixture
def local_analyzer(local_config: EngineConfig) -> SeoAnalyzer:
    """Analyzer that never calls the enrichment provider."""
    return SeoAnalyzer(config=local_config)


@pytest.fixture
def sample_keywords_csv(tmp_path: Path) -> Path:
    """Create a sample keywords CSV file."""
    csv_path = tmp_path / "keywords.csv"
    csv_content = """keyword,search_volume,difficulty
growth strategy,1200,45
content marketing,800,50
Growth Strategy,150,30
email automation,200,35
"""
    csv_path.write_text(csv_content)
    return csv_path


@pytest.fixture
def sample_keywords_excel(tmp_path: Path) -> Path:
    """Create a sample keywords Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "keywords.xlsx"
    data = {
        "Keyword": ["growth strategy", "brand awareness", "customer engagement"],
        "search_volume": [1000, 500, 300],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path


@pytest.fixture
def sample_keywords_txt(tmp_path: Path) -> Path:
    """Create a one-keyword-per-line text file."""
    txt_path = tmp_path / "keywords.txt"
    txt_path.write_text("# launch list\ngrowth strategy\n\nbrand awareness\n")
    return txt_path
