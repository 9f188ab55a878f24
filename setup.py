from setuptools import setup

package_name = 'joystick_panel'

setup(
    name=package_name,
    version='0.1.0',
    package_dir={'': 'src'},
    packages=[package_name, f'{package_name}.widgets'],
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyQt5'],
    extras_require={
        'test': ['pytest', 'pytest-qt'],
    },
    zip_safe=True,
    author='Abdelrahman Mahmoud',
    maintainer='Abdelrahman Mahmoud',
    maintainer_email='abdulrahman.mahmoud1995@gmail.com',
    keywords=['joystick', 'qt', 'widget', 'input', 'dead zone'],
    description='On-screen circular joystick that reports direction angle and power.',
    license='BSD',
    entry_points={
        'console_scripts': [
            'joystick-panel = ' + package_name + '.main:main',
        ],
    },
)
