"""Share documents: JSON input and the text report."""

from shares.loader import (
    METADATA_FIELD, Share, ShareSet, read_document, load_document, decode_shares,
)
from shares.report import format_report
