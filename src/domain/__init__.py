"""Domain Layer"""
