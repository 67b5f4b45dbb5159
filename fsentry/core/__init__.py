"""Core domain logic for fsentry"""
