"""Confirmation Engine - Services"""
