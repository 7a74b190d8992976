"""
Shortlist summary report - backend core

Package layout:
- config/     runtime configuration and report wording
- models/     data model definitions
- sources/    upstream data sources (REST API / local files)
- layout/     paginated report layout engine
- pipeline/   report job execution
"""

__version__ = "0.1.0"
