"""Data saving functionality"""
import json
import os
from typing import Dict, Any
from pack_allocator.utils import ensure_directory, format_timestamp


class ResultSaver:
    """Handles saving of shipment results"""

    def save_final_results(self, complete_output: Dict[str, Any],
                           output_file: str) -> str:
        """Save final shipment results to file"""
        ensure_directory(os.path.dirname(output_file))

        document = dict(complete_output)
        document.setdefault('timestamp', format_timestamp())

        with open(output_file, 'w') as f:
            json.dump(document, f, indent=2)
        print(f"\n💾 Results saved to {output_file}")
        return output_file
