"""CLI 命令"""
