"""Utility functions"""
import os
from datetime import datetime
from typing import List, Dict, Mapping


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    if path:
        os.makedirs(path, exist_ok=True)


def categorize_validation_issues(issues: List[str]) -> Dict[str, int]:
    """Categorize and count validation issues"""
    categories = {
        'coverage_shortfalls': 0,
        'unknown_pack_sizes': 0,
        'invalid_counts': 0,
        'other': 0
    }

    for issue in issues:
        if 'COVERAGE' in issue:
            categories['coverage_shortfalls'] += 1
        elif 'UNKNOWN PACK' in issue:
            categories['unknown_pack_sizes'] += 1
        elif 'COUNT' in issue:
            categories['invalid_counts'] += 1
        else:
            categories['other'] += 1

    return categories


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S')


def format_packs(packs: Mapping[int, int]) -> str:
    """Render a pack mapping as '2 x 5000, 1 x 250', largest pack first"""
    if not packs:
        return 'nothing'
    return ', '.join(f"{count} x {size}" for size, count in sorted(packs.items(), reverse=True))
