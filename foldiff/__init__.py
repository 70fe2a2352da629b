"""A collapsible, multi-file git diff viewer"""
