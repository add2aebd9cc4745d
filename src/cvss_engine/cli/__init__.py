"""CVSS CLI"""
