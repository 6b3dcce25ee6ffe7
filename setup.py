from re import match, S, sub
import os
from setuptools import setup

with open(os.path.join(os.path.dirname(__file__),
                       'discord_layout', '__init__.py'), 'r') as f:
    contents = f.read()
longdesc = match('^([\'"])\\1{2}(.*?)\\1{3}', contents, S).group(2)
version = match(r'[\s\S]*__version__[^\'"]+[\'"]([^\'"]+)[\'"]', contents).group(1)
del contents
longdesc = sub(':(?:class|attr|meth|func):`~?([^`]+)`', r'``\1``', longdesc)

with open(os.path.join(os.path.dirname(__file__),
                       'README.rst'), 'w') as f2:
    f2.write(longdesc)

with open(os.path.join(os.path.dirname(__file__),
                       'requirements.txt'), 'r') as f3:
    requirements = f3.read().strip().splitlines()

setup(
    name="discord-layout",
    version=version,
    description="Layout components and REST resources for discord.py.",
    long_description=longdesc,
    long_description_content_type='text/x-rst',
    license="MIT",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Communications :: Chat',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
    ],
    keywords='discord components layout automod',
    packages=["discord_layout"],
    install_requires=requirements,
    extras_require={
        'test': ['pytest', 'pytest-asyncio'],
    },
    python_requires='>=3.8',
)
