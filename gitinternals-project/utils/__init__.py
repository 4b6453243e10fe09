# This file makes the 'utils' directory a Python package
# The object store readers live in objects, records, history and tree; repository, config and display support the commands
