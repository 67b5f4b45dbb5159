"""Application layer for fsentry"""
