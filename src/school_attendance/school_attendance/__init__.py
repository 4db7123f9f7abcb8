"""School Attendance package.

Feature modules (subjects, students, enrollments, rosters, attendance) each
carry a domain model, a repository interface with its MySQL implementation,
a service holding the business rules and a thin Flask controller.
"""
