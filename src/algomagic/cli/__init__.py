# topmark:header:start
#
#   project      : Algomagic
#   file         : __init__.py
#   file_relpath : src/algomagic/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Click command-line front end for Algomagic."""
