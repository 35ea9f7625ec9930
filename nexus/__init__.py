"""NEXUS matching core"""
