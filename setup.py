''' Pure python client for the lircd control socket. '''

from setuptools import setup

setup(
    name = 'lircd-client',
    version = "0.9.5",
    description = "Client for the lircd control socket",
    keywords = "lirc lircd infrared remote API",
    long_description = open('README.rst', encoding='utf-8').read(),
    license = "GPLv2+",
    packages = ['lircd_client',],
    python_requires = '>=3.5',
    install_requires = ['PyYAML'],
    extras_require = {'test': ['pytest']},
    test_suite = 'tests',
    entry_points = {'console_scripts':
                    ['lirctool=lircd_client.lirctool:main']},
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: Unix',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Hardware'
    ]
)
