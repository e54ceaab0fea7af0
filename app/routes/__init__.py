"""HTTP API blueprints"""
