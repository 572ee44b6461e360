"""Worked solutions to the course's exercise topics."""