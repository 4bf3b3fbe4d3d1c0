"""
Flask blueprints for the family tree API
"""
