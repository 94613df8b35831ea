"""Project-wide constants."""

# -- Settings defaults --------------------------------------------------------
DEFAULT_DATABASE_URL: str = "sqlite:///citations.db"
DEFAULT_PROGRESS_EVERY: int = 1000

# -- Reporting ----------------------------------------------------------------
# Stand-in key for a citation whose PMID is missing or not numeric.
UNKNOWN_PMID: str = "unknown"

# -- Dates --------------------------------------------------------------------
DATE_FORMAT: str = "%Y-%m-%d"

# -- MEDLINE element names (case-sensitive) -------------------------------------
CITATION_TAG: str = "MedlineCitation"
PUBMED_ARTICLE_TAG: str = "PubmedArticle"
ABSTRACT_TEXT_TAG: str = "AbstractText"
ABSTRACT_LABEL_ATTR: str = "Label"

# Label attribute value -> Abstract field. Anything else, including no label,
# lands in the unlabeled "abstract" field.
ABSTRACT_LABEL_FIELDS: dict[str, str] = {
    "OBJECTIVE": "objective",
    "METHODS": "methods",
    "RESULTS": "results",
    "CONCLUSIONS": "conclusions",
}
ABSTRACT_UNLABELED_FIELD: str = "abstract"

# -- Sink -----------------------------------------------------------------------
CITATIONS_TABLE: str = "citations"
