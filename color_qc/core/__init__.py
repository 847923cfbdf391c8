"""
Core Measurement Modules

Contains the algorithmic components of the inspection pipeline:
- OpenCVImageOps: Injected image operations (crop, blur, color conversion)
- RegionExtractor: Rectangle validation and region extraction
- WhiteBalanceCalibrator: Gray-world calibration from a reference card
- LabStatistic: Smoothed mean Lab color of a region
- DeltaEComparator: CIE76 color difference and pass/fail verdict
- TransparencyAnalyzer: Black/white luminance contrast
- InspectionSession: Golden-sample lifecycle and analyze flow
"""
