"""Service layer for the tag hierarchy and file tagging"""
