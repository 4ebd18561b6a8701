# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : tests/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Provisioning step and pipeline tests."""
