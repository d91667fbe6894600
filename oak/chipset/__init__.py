"""The A3000 chipset: system bus, MEMC, IOC, RAM and ROM."""