"""Descriptive statistics, percentiles, histograms and Kaplan-Meier curves."""