from activity_geometry.cli import main

main()
