"""Memo Skill Lambda"""
