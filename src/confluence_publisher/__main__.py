from confluence_publisher import main

main()
