from cicd_demo.main import main

main()
