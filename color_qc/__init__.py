"""
Color QC Measurement Engine

A calibration-anchored color inspection engine for machine-vision QC:
gray-world white balance, Lab region statistics and CIE76 Delta E
comparison of a golden sample against a test sample.
"""

__version__ = "0.1.0"
__author__ = "Color QC Team"
