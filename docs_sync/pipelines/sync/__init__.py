"""Package README sync.

Mirrors each package repository's README into packages/<name>.md under the
documentation repo, wrapped in a generated-file banner.
"""
