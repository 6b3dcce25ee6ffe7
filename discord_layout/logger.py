import logging

logger = logging.getLogger('discord_layout')
