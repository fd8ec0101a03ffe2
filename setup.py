from setuptools import find_packages, setup

package_name = 'planar_fabrik'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test']),
    install_requires=['setuptools', 'numpy'],
    python_requires='>=3.8',
    zip_safe=True,
    maintainer='yuuki',
    maintainer_email='yuuzena@gmail.com',
    description='Iterative FABRIK inverse kinematics for planar serial arms',
    license='TODO: License declaration',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'planar-ik-solver = planar_ik_solver.planar_ik_solver_cli:main',
        ],
    },
)
