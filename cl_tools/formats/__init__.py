"""
Format definitions sub-package for cl-tools.

Contains YAML files listing the ordered date layouts accepted by
``validate_date_string()``.  The loader (format_registry.py in the
parent package) reads ``default.yaml`` at import time.
"""
