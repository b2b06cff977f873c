"""Symlink Toggle 控制台宿主"""
