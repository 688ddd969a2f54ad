"""Core configuration, database and middleware"""
