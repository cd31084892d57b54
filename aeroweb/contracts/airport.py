"""French aerodromes by ICAO location indicator.

Source: https://en.wikipedia.org/wiki/List_of_airports_in_France
The wire string of each member is its own ICAO code.
"""

from enum import Enum


class Airport(str, Enum):
    LFXA = "LFXA"  # Ambérieu-en-Bugey Air Base (BA 278)
    LFHN = "LFHN"  # Bellegarde - Vouvray
    LFKY = "LFKY"  # Belley - Peyrieu
    LFHS = "LFHS"  # Bourg – Ceyzériat
    LFJD = "LFJD"  # Corlier
    LFLK = "LFLK"  # Oyonnax - Arbent
    LFHC = "LFHC"  # Pérouges - Meximieux
    LFFH = "LFFH"  # Château-Thierry – Belleau
    LFAF = "LFAF"  # Laon - Chambry
    LFOW = "LFOW"  # Saint-Quentin - Roupy
    LFYT = "LFYT"  # Saint-Simon – Clastres Air Base
    LFJS = "LFJS"  # Soissons - Courmelles
    LFHX = "LFHX"  # Lapalisse - Périgny
    LFJU = "LFJU"  # Lurcy-Lévis
    LFLT = "LFLT"  # Montluçon - Domérat
    LFHY = "LFHY"  # Moulins – Montbeugny
    LFLV = "LFLV"  # Vichy – Charmeil
    LFMR = "LFMR"  # Barcelonnette – Saint-Pons Airfield
    LFMX = "LFMX"  # Château-Arnoux-Saint-Auban
    LFTP = "LFTP"  # Puimoisson
    LFNS = "LFNS"  # Sisteron - Thèze
    LFNJ = "LFNJ"  # Aspres-sur-Buëch
    LFNA = "LFNA"  # Gap–Tallard
    LFNC = "LFNC"  # Mont-Dauphin - Saint-Crépin
    LFTM = "LFTM"  # Serres - La Bâtie-Montsaléon
    LFMD = "LFMD"  # Cannes – Mandelieu
    LFMN = "LFMN"  # Nice Côte d'Azur
    LFHO = "LFHO"  # Aubenas
    LFHL = "LFHL"  # Langogne - Lespéron
    LFHF = "LFHF"  # Ruoms
    LFQV = "LFQV"  # Charleville-Mézières
    LFAP = "LFAP"  # Rethel - Perthes
    LFSJ = "LFSJ"  # Sedan - Douzy
    LFDJ = "LFDJ"  # Pamiers - Les Pujols
    LFCG = "LFCG"  # Saint-Girons - Antichan
    LFFR = "LFFR"  # Bar-sur-Seine
    LFFN = "LFFN"  # Brienne-le-Château
    LFQX = "LFQX"  # Juvancourt
    LFQR = "LFQR"  # Romilly-sur-Seine
    LFQB = "LFQB"  # Troyes – Barberey
    LFMK = "LFMK"  # Carcassonne
    LFMW = "LFMW"  # Castelnaudary – Villeneuve
    LFMZ = "LFMZ"  # Lézignan-Corbières
    LFNW = "LFNW"  # Puivert
    LFIG = "LFIG"  # Cassagnes-Bégonhès
    LFCM = "LFCM"  # Millau - Larzac
    LFCR = "LFCR"  # Rodez–Aveyron
    LFIF = "LFIF"  # Saint-Affrique - Belmont
    LFCV = "LFCV"  # Villefranche-de-Rouergue
    LFMA = "LFMA"  # Aix-en-Provence
    LFNR = "LFNR"  # Berre - La Fare
    LFMI = "LFMI"  # Istres-Le Tubé Air Base (BA 125)
    LFNZ = "LFNZ"  # Le Mazet-de-Romanin
    LFML = "LFML"  # Marseille Provence
    LFMY = "LFMY"  # Salon-de-Provence Air Base (BA 701)
    LFNE = "LFNE"  # Salon - Eyguières
    LFRK = "LFRK"  # Caen – Carpiquet
    LFAN = "LFAN"  # Condé-sur-Noireau
    LFRG = "LFRG"  # Deauville – Normandie
    LFAS = "LFAS"  # Falaise - Monts d'Eraines
    LFLW = "LFLW"  # Aurillac – Tronquières
    LFHQ = "LFHQ"  # Saint-Flour - Coltines
    LFBU = "LFBU"  # Angoulême – Cognac International
    LFIH = "LFIH"  # Chalais
    LFBG = "LFBG"  # Cognac – Châteaubernard Air Base (BA 709)
    LFCJ = "LFCJ"  # Jonzac - Neulles
    LFBH = "LFBH"  # La Rochelle – Île de Ré
    LFJI = "LFJI"  # Marennes
    LFCP = "LFCP"  # Pons - Avy
    LFDN = "LFDN"  # Rochefort – Saint-Agnant
    LFXR = "LFXR"  # Rochefort - Soubise
    LFCY = "LFCY"  # Royan – Médis
    LFIY = "LFIY"  # Saint-Jean-d'Angély - Saint-Denis-du-Pin
    LFDP = "LFDP"  # Saint-Pierre-d'Oléron
    LFXB = "LFXB"  # Saintes - Thénac
    LFEH = "LFEH"  # Aubigny-sur-Nère
    LFOA = "LFOA"  # Avord Air Base (BA 702)
    LFLD = "LFLD"  # Bourges
    LFFU = "LFFU"  # Châteauneuf-sur-Cher
    LFFV = "LFFV"  # Vierzon - Méreau
    LFSL = "LFSL"  # Brive–Souillac
    LFBV = "LFBV"  # Brive–Laroche
    LFDE = "LFDE"  # Égletons
    LFCU = "LFCU"  # Ussel - Thalamy
    LFKJ = "LFKJ"  # Ajaccio Napoleon Bonaparte
    LFKF = "LFKF"  # Figari–Sud Corse
    LFKO = "LFKO"  # Propriano
    LFKS = "LFKS"  # Solenzara Air Base (BA 126)
    LFKB = "LFKB"  # Bastia – Poretta
    LFKC = "LFKC"  # Calvi – Sainte-Catherine
    LFKT = "LFKT"  # Corte
    LFKG = "LFKG"  # Ghisonaccia Alzitone
    LFGF = "LFGF"  # Beaune - Challanges
    LFSY = "LFSY"  # Cessey
    LFQH = "LFQH"  # Châtillon-sur-Seine
    LFGI = "LFGI"  # Dijon - Darois
    LFSD = "LFSD"  # Dijon–Bourgogne
    LFGZ = "LFGZ"  # Nuits-Saint-Georges
    LFEP = "LFEP"  # Pouilly - Maconge
    LFEW = "LFEW"  # Saulieu - Liernais
    LFGQ = "LFGQ"  # Semur-en-Auxois
    LFET = "LFET"  # Til-Châtel
    LFEB = "LFEB"  # Dinan - Trélivan
    LFRO = "LFRO"  # Lannion – Côte de Granit
    LFRT = "LFRT"  # Saint-Brieuc – Armor
    LFCE = "LFCE"  # Guéret - Saint-Laurent
    LFBK = "LFBK"  # Montluçon – Guéret
    LFIB = "LFIB"  # Belvès - Saint-Pardoux
    LFBE = "LFBE"  # Bergerac Dordogne Périgord
    LFBX = "LFBX"  # Périgueux Bassillac
    LFIK = "LFIK"  # Ribérac - Saint-Aulaye
    LFDF = "LFDF"  # Sainte-Foy-la-Grande
    LFDS = "LFDS"  # Sarlat - Domme
    LFQM = "LFQM"  # Besançon – La Vèze
    LFSA = "LFSA"  # Besançon - Thise
    LFSM = "LFSM"  # Montbéliard – Courcelles
    LFSP = "LFSP"  # Pontarlier
    LFXH = "LFXH"  # Valdahon Air Base
    LFJF = "LFJF"  # Aubenasson
    LFJE = "LFJE"  # La Motte-Chalancon
    LFLQ = "LFLQ"  # Montélimar - Ancône
    LFHD = "LFHD"  # Pierrelate
    LFHE = "LFHE"  # Romans - Saint-Paul
    LFKE = "LFKE"  # Saint-Jean-en-Royans
    LFLR = "LFLR"  # Saint-Rambert-d'Albon
    LFLU = "LFLU"  # Valence-Chabeuil
    LFPD = "LFPD"  # Bernay–St Martin
    LFFY = "LFFY"  # Étrépagny
    LFOE = "LFOE"  # Évreux-Fauville Air Base (BA 105)
    LFFD = "LFFD"  # Saint-André-de-l'Eure
    LFFL = "LFFL"  # Bailleau-Armenonville
    LFOR = "LFOR"  # Chartres – Champhol
    LFOC = "LFOC"  # Châteaudun
    LFON = "LFON"  # Vernouillet
    LFRB = "LFRB"  # Brest Bretagne
    LFRJ = "LFRJ"  # Landivisiau Air Base
    LFRL = "LFRL"  # Lanvéoc - Poulmic Air Base
    LFRU = "LFRU"  # Morlaix – Ploujean
    LFEC = "LFEC"  # Ushant
    LFRQ = "LFRQ"  # Quimper–Cornouaille
    LFMS = "LFMS"  # Alès - Deaux
    LFNT = "LFNT"  # Avignon - Pujaut
    LFTN = "LFTN"  # La Grand-Combe
    LFME = "LFME"  # Nîmes - Courbessac
    LFTW = "LFTW"  # Nîmes–Alès–Camargue–Cévennes
    LFNU = "LFNU"  # Uzès
    LFCB = "LFCB"  # Bagnères-de-Luchon
    LFJH = "LFJH"  # Cazères - Palaminy
    LFIT = "LFIT"  # Toulouse - Bourg-Saint-Bernard
    LFIO = "LFIO"  # Toulouse - Montaudran
    LFBR = "LFBR"  # Muret – Lherm
    LFMG = "LFMG"  # Montagne Noire
    LFIR = "LFIR"  # Revel - Montgey
    LFIM = "LFIM"  # Saint-Gaudens - Montréjeau
    LFBO = "LFBO"  # Toulouse–Blagnac
    LFBF = "LFBF"  # Toulouse - Francazal Air Base (BA 101)
    LFCL = "LFCL"  # Toulouse – Lasbordes
    LFDH = "LFDH"  # Auch - Lamothe
    LFID = "LFID"  # Condom - Valence-sur-Baïse
    LFCN = "LFCN"  # Nogaro
    LFCD = "LFCD"  # Andernos-les-Bains
    LFCH = "LFCH"  # Arcachon – La Teste-de-Buch
    LFCS = "LFCS"  # Bordeaux - Leognan - Saucats
    LFBD = "LFBD"  # Bordeaux–Mérignac
    LFDO = "LFDO"  # Bordeaux - Souge
    LFDY = "LFDY"  # Bordeaux - Yvrac
    LFDR = "LFDR"  # La Réole - Floudès
    LFBC = "LFBC"  # Cazaux Air Base (BA 120)
    LFDU = "LFDU"  # Lesparre - Saint-Laurent-de-Médoc
    LFDI = "LFDI"  # Libourne - Artigues-de-Lussac
    LFDC = "LFDC"  # Montendre - Marcillac
    LFDK = "LFDK"  # Soulac-sur-Mer
    LFIV = "LFIV"  # Vendays-Montalivet
    LFNX = "LFNX"  # Bédarieux - La Tour-sur-Orb
    LFMU = "LFMU"  # Béziers Cap d'Agde
    LFNG = "LFNG"  # Montpellier - Candillargues
    LFMT = "LFMT"  # Montpellier–Méditerranée
    LFNP = "LFNP"  # Pézenas - Nizas
    LFNL = "LFNL"  # Saint-Martin-de-Londres
    LFRD = "LFRD"  # Dinard–Pleurtuit–Saint-Malo
    LFER = "LFER"  # Redon - Bains-sur-Oust
    LFRN = "LFRN"  # Rennes–Saint-Jacques
    LFEO = "LFEO"  # Saint-Servan
    LFEG = "LFEG"  # Argenton-sur-Creuse
    LFLX = "LFLX"  # Châteauroux-Centre \"Marcel Dassault\"
    LFEJ = "LFEJ"  # Châteauroux - Villers
    LFEK = "LFEK"  # Issoudun - Le Fay
    LFEL = "LFEL"  # Le Blanc
    LFEF = "LFEF"  # Amboise - Dierre
    LFJT = "LFJT"  # Tours - Le Louroux
    LFEN = "LFEN"  # Tours - Sorigny
    LFOT = "LFOT"  # Tours Val de Loire
    LFLG = "LFLG"  # Grenoble – Le Versoud
    LFLS = "LFLS"  # Alpes–Isère
    LFHU = "LFHU"  # Alpe d'Huez
    LFKP = "LFKP"  # La Tour-du-Pin - Cessieu
    LFHI = "LFHI"  # Morestel
    LFKH = "LFKH"  # Saint-Jean-d'Avelanne
    LFHH = "LFHH"  # Vienne - Reventin
    LFGD = "LFGD"  # Arbois
    LFGX = "LFGX"  # Champagnole - Crotenay
    LFGJ = "LFGJ"  # Dole–Jura
    LFGL = "LFGL"  # Lons-le-Saunier - Courlaoux
    LFKZ = "LFKZ"  # Saint-Claude - Pratz
    LFDA = "LFDA"  # Aire-sur-l'Adour
    LFBS = "LFBS"  # Biscarrosse – Parentis
    LFBY = "LFBY"  # Dax - Seyresse
    LFCZ = "LFCZ"  # Mimizan
    LFBM = "LFBM"  # Mont-de-Marsan Air Base (BA 118)
    LFIL = "LFIL"  # Rion-des-Landes
    LFOQ = "LFOQ"  # Blois - Le Breuil
    LFFM = "LFFM"  # Lamotte-Beuvron
    LFYR = "LFYR"  # Romorantin - Pruniers
    LFLZ = "LFLZ"  # Feurs - Chambéon
    LFLO = "LFLO"  # Roanne Renaison
    LFHG = "LFHG"  # Saint-Chamond - L'Horme
    LFMH = "LFMH"  # Saint-Étienne–Bouthéon
    LFKM = "LFKM"  # Saint-Galmier
    LFHR = "LFHR"  # Brioude - Beaumont
    LFHP = "LFHP"  # Le Puy – Loudes
    LFFI = "LFFI"  # Ancenis
    LFRE = "LFRE"  # La Baule - Pornichet - Le Pouliguen
    LFRS = "LFRS"  # Nantes Atlantique
    LFRZ = "LFRZ"  # Saint-Nazaire Montoir
    LFEI = "LFEI"  # Briare - Châtillon
    LFEM = "LFEM"  # Montargis - Vimory
    LFOJ = "LFOJ"  # Orléans – Bricy Air Base (BA 123)
    LFOZ = "LFOZ"  # Orléans – Saint-Denis-de-l'Hôtel
    LFFP = "LFFP"  # Pithiviers
    LFCC = "LFCC"  # Cahors - Lalbenque
    LFCF = "LFCF"  # Figeac - Livernon
    LFBA = "LFBA"  # Agen La Garenne
    LFDX = "LFDX"  # Fumel - Montayral
    LFDM = "LFDM"  # Marmande – Virazeil
    LFCW = "LFCW"  # Villeneuve-sur-Lot
    LFNB = "LFNB"  # Mende - Brenoux
    LFNO = "LFNO"  # Florac - Sainte-Enimie
    LFRA = "LFRA"  # Angers – Avrillé
    LFJR = "LFJR"  # Angers – Loire
    LFTQ = "LFTQ"  # Châteaubriant - Pouancé
    LFOU = "LFOU"  # Cholet - Le Pontreau
    LFOD = "LFOD"  # Saumur - Saint-Hilaire - Saint-Florent
    LFRW = "LFRW"  # Avranches - Le Val-Saint-Père
    LFRC = "LFRC"  # Cherbourg – Maupertus
    LFRF = "LFRF"  # Granville - Mont Saint-Michel
    LFOM = "LFOM"  # Lessay
    LFAU = "LFAU"  # Vauville
    LFQK = "LFQK"  # Châlons - Écury-sur-Coole
    LFOK = "LFOK"  # Châlons Vatry
    LFSW = "LFSW"  # Épernay - Plivot
    LFYM = "LFYM"  # Marigny - Le Grand
    LFXM = "LFXM"  # Mourmelon
    LFSR = "LFSR"  # Reims - Champagne
    LFQA = "LFQA"  # Reims – Prunay
    LFFZ = "LFFZ"  # Sézanne - Saint-Remy
    LFSK = "LFSK"  # Vitry-le-François - Vauclerc
    LFJA = "LFJA"  # Quartier Général d'Aboville (UAF)
    LFFJ = "LFFJ"  # Joinville - Mussey
    LFSU = "LFSU"  # Langres - Rolampont
    LFSI = "LFSI"  # Saint-Dizier – Robinson Air Base (BA 113)
    LFOV = "LFOV"  # Laval - Entrammes
    LFGR = "LFGR"  # Doncourt-lès-Conflans
    LFGS = "LFGS"  # Longuyon - Villette
    LFQC = "LFQC"  # Lunéville-Croismare
    LFEX = "LFEX"  # Nancy - Azelot
    LFSN = "LFSN"  # Nancy-Essey
    LFEZ = "LFEZ"  # Nancy - Malzéville
    LFSO = "LFSO"  # Nancy – Ochey Air Base (BA 133)
    LFSV = "LFSV"  # Pont-Saint-Vincent
    LFAW = "LFAW"  # Villerupt
    LFEU = "LFEU"  # Bar-le-Duc - Les Hauts-de-Chée
    LFQE = "LFQE"  # Étain - Rouvres Air Base
    LFYK = "LFYK"  # Montmédy - Marville
    LFGW = "LFGW"  # Verdun-Le-Rozelier
    LFEA = "LFEA"  # Belle-Île
    LFXQ = "LFXQ"  # Coëtquidan Air Base
    LFES = "LFES"  # Guiscriff Scaer
    LFRH = "LFRH"  # Lorient South Brittany
    LFRP = "LFRP"  # Ploërmel - Loyat
    LFED = "LFED"  # Pontivy
    LFEQ = "LFEQ"  # Quiberon
    LFRV = "LFRV"  # Vannes
    LFQZ = "LFQZ"  # Dieuze - Gueblange
    LFSF = "LFSF"  # Metz-Frescaty Air Base (BA 128)
    LFJL = "LFJL"  # Metz–Nancy–Lorraine
    LFQP = "LFQP"  # Quartier La Horie
    LFGT = "LFGT"  # Sarrebourg - Buhl
    LFGU = "LFGU"  # Sarreguemines - Neunkirch
    LFGV = "LFGV"  # Thionville - Yutz
    LFJC = "LFJC"  # Clamecy
    LFGH = "LFGH"  # Cosne-sur-Loire
    LFQG = "LFQG"  # Nevers - Fourchambault
    LFQI = "LFQI"  # Cambrai - Épinoy Air Base (BA 103)
    LFYG = "LFYG"  # Cambrai-Niergnies
    LFAK = "LFAK"  # Dunkerque – Les Moëres
    LFQQ = "LFQQ"  # Lille
    LFQO = "LFQO"  # Lille - Marcq-en-Baroeul
    LFQJ = "LFQJ"  # Maubeuge
    LFQT = "LFQT"  # Merville–Calonne
    LFAV = "LFAV"  # Valenciennes-Denain
    LFOB = "LFOB"  # Beauvais–Tillé
    LFAD = "LFAD"  # Compiègne - Margny
    LFPC = "LFPC"  # Creil Air Base (BA 110)
    LFPP = "LFPP"  # Plessis-Belleville
    LFOF = "LFOF"  # Alençon - Valframbert
    LFAJ = "LFAJ"  # Argentan
    LFAO = "LFAO"  # Bagnoles-de-l'Orne - Couterne
    LFOG = "LFOG"  # Flers - Saint-Paul
    LFOL = "LFOL"  # L'Aigle - Saint-Michel
    LFAX = "LFAX"  # Mortagne
    LFQD = "LFQD"  # Arras – Roclincourt
    LFAM = "LFAM"  # Berck-sur-Mer
    LFAC = "LFAC"  # Calais–Dunkerque
    LFAT = "LFAT"  # Le Touquet – Côte d'Opale
    LFQL = "LFQL"  # Lens - Bénifontaine
    LFQN = "LFQN"  # Saint-Omer - Wizernes
    LFQS = "LFQS"  # Vitry-En-Artois
    LFHT = "LFHT"  # Ambert - Le Poyet
    LFLC = "LFLC"  # Clermont-Ferrand Auvergne
    LFHA = "LFHA"  # Issoire - Le Broc
    LFBZ = "LFBZ"  # Biarritz Pays Basque
    LFIX = "LFIX"  # Itxassou
    LFCO = "LFCO"  # Oloron - Herrère
    LFBP = "LFBP"  # Pau Pyrénées
    LFDQ = "LFDQ"  # Castelnau-Magnoac
    LFIP = "LFIP"  # Peyresourde - Balestas
    LFDT = "LFDT"  # Tarbes - Laloubère
    LFBT = "LFBT"  # Tarbes–Lourdes–Pyrénées
    LFNQ = "LFNQ"  # Mont-Louis - La Quillane
    LFMP = "LFMP"  # Perpignan–Rivesaltes
    LFYS = "LFYS"  # Sainte-Léocadie
    LFSH = "LFSH"  # Haguenau
    LFQU = "LFQU"  # Sarre-Union
    LFQY = "LFQY"  # Saverne - Steinbourg
    LFST = "LFST"  # Strasbourg
    LFGC = "LFGC"  # Strasbourg - Neuhof
    LFSB = "LFSB"  # Eur
    LFGA = "LFGA"  # Colmar
    LFSC = "LFSC"  # Quartier Colonel Dio (BA 132)
    LFGB = "LFGB"  # Mulhouse–Habsheim
    LFHW = "LFHW"  # Belleville - Villié-Morgon
    LFKL = "LFKL"  # Lyon - Brindas
    LFLY = "LFLY"  # Lyon–Bron
    LFHJ = "LFHJ"  # Lyon - Corbas
    LFLL = "LFLL"  # Lyon–Saint-Exupéry
    LFHV = "LFHV"  # Villefranche – Tarare
    LFYH = "LFYH"  # Broyes-lès-Pesmes
    LFEV = "LFEV"  # Gray - Saint-Adrien
    LFYL = "LFYL"  # Lure - Malbouhans
    LFSX = "LFSX"  # Luxeuil - Saint-Sauveur Air Base (BA 116)
    LFQW = "LFQW"  # Vesoul - Frotey Airfield
    LFQF = "LFQF"  # Autun - Bellevue
    LFLH = "LFLH"  # Chalon – Champforgeuil
    LFLM = "LFLM"  # Mâcon - Charnay
    LFGM = "LFGM"  # Montceau-les-Mines - Pouilloux
    LFGN = "LFGN"  # Paray-le-Monial
    LFLN = "LFLN"  # Saint-Yan
    LFFX = "LFFX"  # Tournus - Cruisery
    LFAL = "LFAL"  # La Flèche - Thorée-les-Pins
    LFRM = "LFRM"  # Le Mans - Arnage
    LFKA = "LFKA"  # Albertville
    LFLE = "LFLE"  # Chambéry
    LFLB = "LFLB"  # Chambéry
    LFLJ = "LFLJ"  # Courchevel Altiport
    LFKX = "LFKX"  # Méribel Altiport
    LFKR = "LFKR"  # Saint-Rémy-de-Maurienne
    LFKD = "LFKD"  # Sollières-Sardières
    LFLP = "LFLP"  # Annecy – Haute-Savoie – Mont Blanc
    LFLI = "LFLI"  # Annemasse
    LFHM = "LFHM"  # Megève Altiport
    LFHZ = "LFHZ"  # Sallanches
    LFAB = "LFAB"  # Dieppe - Saint-Aubin
    LFAE = "LFAE"  # Eu - Mers - Le Tréport
    LFOH = "LFOH"  # Le Havre – Octeville
    LFOY = "LFOY"  # Le Havre - Saint-Romain
    LFOP = "LFOP"  # Rouen
    LFOS = "LFOS"  # Saint-Valery - Vittefleur
    LFPH = "LFPH"  # Chelles - Le Pin
    LFPK = "LFPK"  # Coulommiers – Voisins
    LFPQ = "LFPQ"  # Fontenay-Trésigny
    LFFG = "LFFG"  # La Ferté-Gaucher
    LFPL = "LFPL"  # Lognes – Émerainville
    LFPE = "LFPE"  # Meaux - Esbly
    LFPM = "LFPM"  # Melun Villaroche
    LFPU = "LFPU"  # Moret - Episy
    LFAI = "LFAI"  # Nangis les Loges
    LFPF = "LFPF"  # Beynes - Thiverval
    LFPX = "LFPX"  # Aérodrome de Chavenay - Villepreux[2] (UAF)
    LFXU = "LFXU"  # Les Mureaux
    LFPZ = "LFPZ"  # Saint-Cyr-l'École
    LFPN = "LFPN"  # Toussus-le-Noble
    LFPV = "LFPV"  # Vélizy – Villacoublay Air Base (BA 107)
    LFJB = "LFJB"  # Mauléon
    LFBN = "LFBN"  # Niort - Souché
    LFCT = "LFCT"  # Thouars
    LFOI = "LFOI"  # Abbeville
    LFAQ = "LFAQ"  # Albert – Picardie
    LFAY = "LFAY"  # Amiens – Glisy
    LFAR = "LFAR"  # Montdidier
    LFAG = "LFAG"  # Peronne-St Quentin
    LFCI = "LFCI"  # Albi - Le Sequestre
    LFCK = "LFCK"  # Castres–Mazamet
    LFDG = "LFDG"  # Gaillac - Lisle-sur-Tarn
    LFCQ = "LFCQ"  # Graulhet - Montdragon
    LFCX = "LFCX"  # Castelsarrazin - Moissac
    LFDB = "LFDB"  # Montauban
    LFTF = "LFTF"  # Cuers - Pierrefeu
    LFMF = "LFMF"  # Fayence-Tourrettes Airfield
    LFTZ = "LFTZ"  # La Môle – Saint-Tropez
    LFMQ = "LFMQ"  # Le Castellet
    LFMC = "LFMC"  # Le Luc – Le Cannet
    LFTH = "LFTH"  # Toulon–Hyères
    LFNF = "LFNF"  # Vinon
    LFMV = "LFMV"  # Avignon – Provence
    LFNH = "LFNH"  # Carpentras
    LFMO = "LFMO"  # Orange-Caritat Air Base (BA 115)
    LFND = "LFND"  # Pont-Saint-Esprit
    LFXI = "LFXI"  # Saint-Christol
    LFNV = "LFNV"  # Valréas - Visan
    LFFK = "LFFK"  # Fontenay-le-Comte
    LFEY = "LFEY"  # Île d'Yeu
    LFRI = "LFRI"  # La Roche-sur-Yon
    LFOO = "LFOO"  # Les Sables-d'Olonne - Talmont
    LFFW = "LFFW"  # Montaigu - Saint-Georges
    LFCA = "LFCA"  # Châtellerault - Targe
    LFDW = "LFDW"  # Chauvigny
    LFDV = "LFDV"  # Couhé - Vérac
    LFDL = "LFDL"  # Loudun
    LFBI = "LFBI"  # Poitiers–Biard
    LFBL = "LFBL"  # Limoges – Bellegarde
    LFBJ = "LFBJ"  # Saint-Junien Maryse Bastié
    LFYD = "LFYD"  # Damblain
    LFSE = "LFSE"  # Épinal - Dogneville
    LFSG = "LFSG"  # Épinal – Mirecourt
    LFFT = "LFFT"  # Neufchâteau
    LFGY = "LFGY"  # Saint-Dié - Remomeix
    LFSZ = "LFSZ"  # Vittel - Champ-de-Courses
    LFXC = "LFXC"  # Vittel - Auzainvilliers
    LFLA = "LFLA"  # Auxerre – Branches
    LFGE = "LFGE"  # Avallon
    LFGK = "LFGK"  # Joigny
    LFGO = "LFGO"  # Pont-sur-Yonne
    LFGP = "LFGP"  # Saint-Florentin - Chéu
    LFGG = "LFGG"  # Belfort Chaux
    LFSQ = "LFSQ"  # Belfort - Fontaine
    LFPY = "LFPY"  # Brétigny-sur-Orge Air Base (BA 217)
    LFFB = "LFFB"  # Buno-Bonnevaux
    LFOX = "LFOX"  # Étampes - Mondésir
    LFFQ = "LFFQ"  # La Ferté-Alais
    LFPB = "LFPB"  # Paris–Le Bourget
    LFPO = "LFPO"  # Orly
    LFFE = "LFFE"  # Enghien Moisselles
    LFFC = "LFFC"  # Mantes - Chérence
    LFPG = "LFPG"  # Charles de Gaulle
    LFPA = "LFPA"  # Persan-Beaumont
    LFPT = "LFPT"  # Pontoise – Cormeilles
