"""Documentation pipelines.

Site build: guides/ + packages/ markdown -> page components and an index manifest
Package sync: remote package READMEs -> packages/*.md with a generated-file banner
"""
