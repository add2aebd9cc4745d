"""Batch scoring"""
