from webhook_receiver.server import main

main()
