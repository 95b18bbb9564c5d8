"""
Scholarship Matching

Ranks a static scholarship catalog against a student's profile and search
preferences, with explanations, application guidance and an executive summary.
"""
