"""
Work Structures app: sites, projects, shifts, the employer profile and its
tax regime history.
"""
