"""Shared fixtures: published CVSS v1 examples"""

import pytest


@pytest.fixture
def cve_2002_0392():
    """Apache chunked encoding memory corruption"""
    return {
        'base': {
            'AccessVector': 'Remote',
            'AccessComplexity': 'Low',
            'Authentication': 'Not-Required',
            'ConfidentialityImpact': 'Partial',
            'IntegrityImpact': 'Partial',
            'AvailabilityImpact': 'Complete',
            'ImpactBias': 'Availability',
        },
        'temporal': {
            'Exploitability': 'Functional',
            'RemediationLevel': 'Official-Fix',
            'ReportConfidence': 'Confirmed',
        },
        'environmental': {
            'CollateralDamagePotential': 'Medium',
            'TargetDistribution': 'Medium',
        },
    }


@pytest.fixture
def cve_2003_0818():
    """Microsoft Windows ASN.1 library integer handling"""
    return {
        'base': {
            'AccessVector': 'Remote',
            'AccessComplexity': 'Low',
            'Authentication': 'Not-Required',
            'ConfidentialityImpact': 'Complete',
            'IntegrityImpact': 'Complete',
            'AvailabilityImpact': 'Complete',
            'ImpactBias': 'Normal',
        },
        'temporal': {
            'Exploitability': 'Functional',
            'RemediationLevel': 'Official-Fix',
            'ReportConfidence': 'Confirmed',
        },
    }


@pytest.fixture
def cve_2003_0062():
    """NOD32 antivirus local buffer overflow"""
    return {
        'base': {
            'AccessVector': 'Local',
            'AccessComplexity': 'High',
            'Authentication': 'Not-Required',
            'ConfidentialityImpact': 'Complete',
            'IntegrityImpact': 'Complete',
            'AvailabilityImpact': 'Complete',
            'ImpactBias': 'Normal',
        },
        'temporal': {
            'Exploitability': 'Proof-of-Concept',
            'RemediationLevel': 'Official-Fix',
            'ReportConfidence': 'Confirmed',
        },
    }
