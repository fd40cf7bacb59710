"""
Use Cases

Organized into domain folders:
- auth/: Signup, email confirmation and login
- members/: Core-team administration of profiles and pending users
- events/: Event and workshop catalogue and registration
- attendance/: Attendance sheet, attendance updates and CSV export
- teams/: Team invitations, applications and notifications
- leaderboard/: Team ranking and point adjustments
- tournaments/: Tournaments, their standings and event winners
- announcements/: Announcement store and unseen counts
- dashboard/: Read-only aggregates
"""
