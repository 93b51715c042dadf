from provisioner.dynamodb_provisioner import main


main()
