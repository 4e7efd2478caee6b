"""
Test suite for the cliquecover clique / independent set / vertex cover package.
"""
