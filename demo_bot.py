import os
import logging
import discord
import discord_layout as layout
from discord_layout.simples import _Route

client = discord.Client(intents=discord.Intents.default())

def release_notes(view: layout.View):
    box = view.container(colour='#5865F2')
    box.text_display('## discord-layout demo')
    section = box.section(components=[
        'Sections put text next to a button or thumbnail.'])
    section.button('link', label='discord.py', url='https://discordpy.rtfd.io')
    box.separator(spacing='large')
    # a gallery of one image
    box.media_gallery().item(
        'https://cdn.discordapp.com/embed/avatars/0.png',
        description='Default avatar')
    row = box.row()
    row.button('primary', label='Hello', custom_id='demo:hello',
               emoji='\N{WAVING HAND SIGN}')
    row.button('danger', label='Goodbye', custom_id='demo:goodbye')
    view.row().string_select(
        'demo:colour', placeholder='Pick a colour',
        configure=lambda menu: (
            menu.option('Red', 'red', emoji='\N{LARGE RED CIRCLE}'),
            menu.option('Blue', 'blue', emoji='\N{LARGE BLUE CIRCLE}'),
        ))

@client.event
async def on_ready():
    logger.info('Logged in as %s', client.user)
    channel_id = int(os.environ['DISCORD_CHANNEL'])
    view = layout.View(release_notes)
    route = _Route('POST', '/channels/{channel_id}/messages',
                   channel_id=channel_id)
    data = await client.http.request(route, json=view.to_payload())
    # parse what Discord echoed back, including any ids it assigned
    for component in layout.parse_components(data.get('components', [])):
        logger.info('Sent %r', component)
    await client.close()

# show library logs
logger = logging.getLogger('discord_layout')
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.StreamHandler())
logger.handlers[0].setFormatter(logging.Formatter(
    '{levelname}\t{name}\t{asctime} {message}', style='{'))

token = os.environ['DISCORD_TOKEN'].strip()

try:
    client.run(token, log_handler=None)
finally:
    print('Goodbye.')
