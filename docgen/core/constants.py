"""
Constants
Centralised storage for file suffixes, comment delimiters, and policy names.
"""
SOURCE_SUFFIXES = (".js", ".ts")
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
POLICY_REPLACE = "replace"
POLICY_PREPEND = "prepend"
POLICIES = [POLICY_REPLACE, POLICY_PREPEND]
