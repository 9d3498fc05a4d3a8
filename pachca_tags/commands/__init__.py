# -*- coding: utf-8 -*-

"""
Click commands for the pachca-tags CLI tool.
"""
