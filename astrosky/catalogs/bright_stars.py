"""
Bright star catalog

The naked-eye stars down to about magnitude 3, J2000 positions.
Enough for a recognisable sky; load the full HYG database with
star_catalog.load_hyg_catalog() for anything fainter.

Entries are roughly in magnitude order; StarCatalog sorts them exactly.
"""

# Format: (designation, proper_name, ra_deg, dec_deg, distance_pc, mag, color_index, constellation)
BRIGHT_STARS = [
    ("Alp CMa", "Sirius", 101.2872, -16.7161, 2.64, -1.46, 0.009, "CMa"),
    ("Alp Car", "Canopus", 95.9880, -52.6957, 95.0, -0.74, 0.164, "Car"),
    ("Alp Boo", "Arcturus", 213.9153, 19.1824, 11.26, -0.05, 1.239, "Boo"),
    ("Alp1Cen", "Rigil Kentaurus", 219.9021, -60.8340, 1.35, -0.01, 0.710, "Cen"),
    ("Alp Lyr", "Vega", 279.2347, 38.7837, 7.68, 0.03, 0.000, "Lyr"),
    ("Alp Aur", "Capella", 79.1723, 45.9980, 13.1, 0.08, 0.795, "Aur"),
    ("Bet Ori", "Rigel", 78.6345, -8.2016, 264.5, 0.13, -0.030, "Ori"),
    ("Alp CMi", "Procyon", 114.8255, 5.2250, 3.51, 0.37, 0.432, "CMi"),
    ("Alp Ori", "Betelgeuse", 88.7929, 7.4071, 152.7, 0.42, 1.850, "Ori"),
    ("Alp Eri", "Achernar", 24.4285, -57.2368, 42.7, 0.46, -0.158, "Eri"),
    ("Bet Cen", "Hadar", 210.9559, -60.3730, 120.2, 0.61, -0.231, "Cen"),
    ("Alp Aql", "Altair", 297.6958, 8.8683, 5.13, 0.76, 0.221, "Aql"),
    ("Alp1Cru", "Acrux", 186.6496, -63.0991, 98.3, 0.77, -0.240, "Cru"),
    ("Alp Tau", "Aldebaran", 68.9802, 16.5093, 20.0, 0.86, 1.538, "Tau"),
    ("Alp Sco", "Antares", 247.3519, -26.4320, 170.0, 0.96, 1.865, "Sco"),
    ("Alp Vir", "Spica", 201.2983, -11.1613, 76.6, 0.97, -0.235, "Vir"),
    ("Bet Gem", "Pollux", 116.3290, 28.0262, 10.3, 1.14, 0.991, "Gem"),
    ("Alp PsA", "Fomalhaut", 344.4127, -29.6222, 7.7, 1.16, 0.145, "PsA"),
    ("Alp Cyg", "Deneb", 310.3580, 45.2803, 802.0, 1.25, 0.092, "Cyg"),
    ("Bet Cru", "Mimosa", 191.9303, -59.6888, 85.3, 1.25, -0.238, "Cru"),
    ("Alp Leo", "Regulus", 152.0930, 11.9672, 24.3, 1.40, -0.087, "Leo"),
    ("Eps CMa", "Adhara", 104.6565, -28.9721, 132.0, 1.50, -0.211, "CMa"),
    ("Alp Gem", "Castor", 113.6494, 31.8883, 15.6, 1.58, 0.034, "Gem"),
    ("Lam Sco", "Shaula", 263.4022, -37.1038, 175.0, 1.62, -0.231, "Sco"),
    ("Gam Cru", "Gacrux", 187.7915, -57.1132, 27.2, 1.63, 1.600, "Cru"),
    ("Gam Ori", "Bellatrix", 81.2828, 6.3497, 74.5, 1.64, -0.224, "Ori"),
    ("Bet Tau", "Elnath", 81.5730, 28.6074, 41.0, 1.65, -0.130, "Tau"),
    ("Bet Car", "Miaplacidus", 138.2999, -69.7172, 34.7, 1.67, 0.070, "Car"),
    ("Eps Ori", "Alnilam", 84.0534, -1.2019, 606.0, 1.69, -0.184, "Ori"),
    ("Alp Gru", "Alnair", 332.0583, -46.9610, 31.1, 1.73, -0.070, "Gru"),
    ("Zet Ori", "Alnitak", 85.1897, -1.9426, 225.0, 1.74, -0.199, "Ori"),
    ("Eps UMa", "Alioth", 193.5073, 55.9598, 25.3, 1.76, -0.022, "UMa"),
    ("Alp Per", "Mirfak", 51.0807, 49.8612, 155.0, 1.79, 0.481, "Per"),
    ("Eps Sgr", "Kaus Australis", 276.0430, -34.3846, 44.0, 1.79, -0.031, "Sgr"),
    ("Alp UMa", "Dubhe", 165.9320, 61.7510, 37.7, 1.81, 1.061, "UMa"),
    ("Del CMa", "Wezen", 107.0979, -26.3932, 490.0, 1.83, 0.671, "CMa"),
    ("Eta UMa", "Alkaid", 206.8852, 49.3133, 31.9, 1.85, -0.099, "UMa"),
    ("Eps Car", "Avior", 125.6285, -59.5095, 185.0, 1.86, 1.196, "Car"),
    ("The Sco", "Sargas", 264.3297, -42.9978, 91.0, 1.86, 0.406, "Sco"),
    ("Bet Aur", "Menkalinan", 89.8822, 44.9474, 25.2, 1.90, 0.077, "Aur"),
    ("Alp TrA", "Atria", 252.1662, -69.0277, 127.0, 1.91, 1.447, "TrA"),
    ("Gam Gem", "Alhena", 99.4280, 16.3993, 33.5, 1.92, 0.001, "Gem"),
    ("Alp Pav", "Peacock", 306.4119, -56.7351, 55.6, 1.94, -0.118, "Pav"),
    ("Alp UMi", "Polaris", 37.9546, 89.2641, 133.0, 1.97, 0.636, "UMi"),
    ("Bet CMa", "Mirzam", 95.6749, -17.9559, 151.0, 1.98, -0.240, "CMa"),
    ("Alp Hya", "Alphard", 141.8968, -8.6586, 55.0, 1.99, 1.440, "Hya"),
    ("Alp Ari", "Hamal", 31.7934, 23.4624, 20.2, 2.01, 1.151, "Ari"),
    ("Bet Cet", "Diphda", 10.8974, -17.9866, 29.5, 2.04, 1.019, "Cet"),
    ("Sig Sgr", "Nunki", 283.8164, -26.2967, 69.8, 2.05, -0.134, "Sgr"),
    ("The Cen", "Menkent", 211.6706, -36.3700, 18.0, 2.06, 1.011, "Cen"),
    ("Alp And", "Alpheratz", 2.0969, 29.0904, 29.7, 2.06, -0.038, "And"),
    ("Bet And", "Mirach", 17.4330, 35.6206, 60.5, 2.07, 1.576, "And"),
    ("Kap Ori", "Saiph", 86.9391, -9.6696, 198.0, 2.07, -0.168, "Ori"),
    ("Bet UMi", "Kochab", 222.6764, 74.1555, 40.1, 2.07, 1.465, "UMi"),
    ("Alp Oph", "Rasalhague", 263.7336, 12.5600, 14.9, 2.08, 0.155, "Oph"),
    ("Bet Per", "Algol", 47.0422, 40.9556, 27.6, 2.09, -0.003, "Per"),
    ("Gam1And", "Almach", 30.9748, 42.3297, 120.0, 2.10, 1.370, "And"),
    ("Bet Leo", "Denebola", 177.2649, 14.5721, 11.0, 2.14, 0.090, "Leo"),
    ("Gam Cas", "Navi", 14.1772, 60.7167, 168.0, 2.15, -0.150, "Cas"),
    ("Gam Cen", "Muhlifain", 190.3794, -48.9599, 39.9, 2.20, -0.010, "Cen"),
    ("Zet Pup", "Naos", 120.8960, -40.0031, 332.0, 2.21, -0.269, "Pup"),
    ("Iot Car", "Aspidiske", 139.2725, -59.2752, 235.0, 2.21, 0.189, "Car"),
    ("Alp CrB", "Alphecca", 233.6720, 26.7147, 23.0, 2.22, 0.032, "CrB"),
    ("Lam Vel", "Suhail", 136.9990, -43.4326, 167.0, 2.23, 1.665, "Vel"),
    ("Zet UMa", "Mizar", 200.9814, 54.9254, 26.3, 2.23, 0.057, "UMa"),
    ("Gam Cyg", "Sadr", 305.5571, 40.2567, 560.0, 2.23, 0.673, "Cyg"),
    ("Alp Cas", "Schedar", 10.1268, 56.5373, 70.0, 2.24, 1.170, "Cas"),
    ("Gam Dra", "Eltanin", 269.1516, 51.4889, 47.3, 2.24, 1.521, "Dra"),
    ("Del Ori", "Mintaka", 83.0017, -0.2991, 212.0, 2.25, -0.175, "Ori"),
    ("Bet Cas", "Caph", 2.2945, 59.1498, 16.8, 2.28, 0.380, "Cas"),
    ("Del Sco", "Dschubba", 240.0834, -22.6217, 150.0, 2.29, -0.120, "Sco"),
    ("Eps Sco", "Larawag", 252.5409, -34.2932, 19.5, 2.29, 1.144, "Sco"),
    ("Bet UMa", "Merak", 165.4603, 56.3824, 24.4, 2.34, -0.020, "UMa"),
    ("Eps Boo", "Izar", 221.2468, 27.0742, 62.0, 2.35, 0.966, "Boo"),
    ("Eps Peg", "Enif", 326.0465, 9.8750, 211.0, 2.38, 1.520, "Peg"),
    ("Alp Phe", "Ankaa", 6.5710, -42.3060, 25.9, 2.40, 1.083, "Phe"),
    ("Gam UMa", "Phecda", 178.4577, 53.6948, 25.5, 2.41, 0.044, "UMa"),
    ("Eta Oph", "Sabik", 257.5945, -15.7249, 27.1, 2.43, 0.059, "Oph"),
    ("Bet Peg", "Scheat", 345.9436, 28.0828, 60.0, 2.44, 1.655, "Peg"),
    ("Alp Cep", "Alderamin", 319.6449, 62.5856, 15.0, 2.45, 0.257, "Cep"),
    ("Eta CMa", "Aludra", 111.0238, -29.3031, 600.0, 2.45, -0.083, "CMa"),
    ("Kap Vel", "Markeb", 140.5284, -55.0107, 165.0, 2.47, -0.180, "Vel"),
    ("Alp Peg", "Markab", 346.1902, 15.2053, 40.0, 2.49, -0.002, "Peg"),
    ("Alp Cet", "Menkar", 45.5699, 4.0897, 76.0, 2.54, 1.640, "Cet"),
    ("Del Leo", "Zosma", 168.5271, 20.5237, 17.9, 2.56, 0.128, "Leo"),
    ("Bet1Sco", "Acrab", 241.3593, -19.8055, 124.0, 2.56, -0.070, "Sco"),
    ("Alp Lep", "Arneb", 83.1826, -17.8223, 680.0, 2.58, 0.211, "Lep"),
    ("Gam Crv", "Gienah", 183.9515, -17.5419, 47.0, 2.59, -0.107, "Crv"),
    ("Bet Lib", "Zubeneschamali", 229.2517, -9.3829, 56.8, 2.61, -0.108, "Lib"),
    ("Alp Ser", "Unukalhai", 236.0670, 6.4256, 22.7, 2.63, 1.167, "Ser"),
    ("Bet Ari", "Sheratan", 28.6600, 20.8080, 18.0, 2.64, 0.165, "Ari"),
    ("Alp Col", "Phact", 84.9122, -34.0741, 80.0, 2.65, -0.120, "Col"),
    ("Bet Crv", "Kraz", 188.5968, -23.3968, 45.0, 2.65, 0.890, "Crv"),
    ("Del Cas", "Ruchbah", 21.4540, 60.2353, 30.0, 2.66, 0.157, "Cas"),
    ("Gam Aql", "Tarazed", 296.5649, 10.6133, 140.0, 2.72, 1.520, "Aql"),
    ("Alp2Lib", "Zubenelgenubi", 222.7196, -16.0418, 23.0, 2.75, 0.150, "Lib"),
    ("Eps Vir", "Vindemiatrix", 195.5442, 10.9592, 33.6, 2.79, 0.940, "Vir"),
    ("Eta Tau", "Alcyone", 56.8712, 24.1051, 136.0, 2.87, -0.090, "Tau"),
    ("Bet Aqr", "Sadalsuud", 322.8897, -5.5712, 165.0, 2.90, 0.830, "Aqr"),
    ("Bet1Cyg", "Albireo", 292.6803, 27.9597, 130.0, 3.05, 1.130, "Cyg"),
    ("Del UMa", "Megrez", 183.8565, 57.0326, 24.7, 3.32, 0.080, "UMa"),
    ("Alp Dra", "Thuban", 211.0973, 64.3758, 92.0, 3.65, -0.050, "Dra"),
    ("Eps Lyr", "", 281.0845, 39.6700, 49.8, 4.67, 0.190, "Lyr"),
    ("80 UMa", "Alcor", 201.3064, 54.9879, 25.1, 3.99, 0.169, "UMa"),
    ("Zet Lyr", "", 281.1932, 37.6051, 46.0, 4.34, 0.190, "Lyr"),
]
