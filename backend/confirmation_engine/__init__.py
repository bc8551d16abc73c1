"""Confirmation Engine - Scottish confirmation (form C1) generator"""
