"""Infrastructure layer for fsentry"""
