"""Symlink Toggle 核心模块"""
